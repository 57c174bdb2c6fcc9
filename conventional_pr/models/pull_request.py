"""Pull request snapshot models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from .repository import Meta


class Commit(BaseModel):
    """A commit that belongs to a pull request."""

    model_config = ConfigDict(frozen=True)

    sha: str
    message: str
    verified: bool = False

    def __repr__(self) -> str:
        return f"<Commit(sha='{self.short_sha}', message='{self.message[:50]}')>"

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @classmethod
    def from_github_data(cls, github_data: dict[str, Any]) -> "Commit":
        """Create instance from a pull request commit object."""
        commit = github_data.get("commit") or {}
        verification = commit.get("verification") or {}
        return cls(
            sha=github_data["sha"],
            message=commit.get("message") or "",
            verified=bool(verification.get("verified", False)),
        )


class PullRequest(BaseModel):
    """Immutable snapshot of a pull request, taken once per validation run."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    body: str = ""
    branch: str = ""
    author: str = ""
    author_is_bot: bool = False
    draft: bool = False
    closed: bool = False
    changed_files: int = 0
    repository: Meta
    # None when the commit list could not be fetched
    commits: Optional[tuple[Commit, ...]] = ()

    def __repr__(self) -> str:
        return f"<PullRequest(repository='{self.repository}', number={self.number}, title='{self.title[:50]}')>"

    @classmethod
    def from_github_data(
        cls,
        github_data: dict[str, Any],
        repository: Meta,
        commits: Optional[list[dict[str, Any]]] = None,
    ) -> "PullRequest":
        """Create instance from a GitHub pull request object.

        Args:
        ----
            github_data: Pull request object from the REST API or an event payload
            repository: Repository the pull request targets
            commits: Commit objects of the pull request, None if unavailable

        Returns:
        -------
            PullRequest snapshot

        """
        user = github_data.get("user") or {}
        head = github_data.get("head") or {}
        return cls(
            number=github_data["number"],
            title=github_data.get("title") or "",
            body=github_data.get("body") or "",
            branch=head.get("ref") or "",
            author=user.get("login") or "",
            author_is_bot=user.get("type") == "Bot",
            draft=bool(github_data.get("draft", False)),
            closed=github_data.get("state") == "closed",
            changed_files=github_data.get("changed_files") or 0,
            repository=repository,
            commits=None if commits is None else tuple(Commit.from_github_data(c) for c in commits),
        )
