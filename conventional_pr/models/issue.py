"""Issue models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from .repository import Meta


class Issue(BaseModel):
    """A GitHub issue."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str = ""
    state: str = "open"
    repository: Meta

    @classmethod
    def from_github_data(cls, github_data: dict[str, Any], repository: Meta) -> "Issue":
        """Create instance from a GitHub issue object."""
        return cls(
            number=github_data["number"],
            title=github_data.get("title") or "",
            state=github_data.get("state") or "open",
            repository=repository,
        )


class IssueReference(BaseModel):
    """An issue mentioned after a closing keyword in a pull request body."""

    model_config = ConfigDict(frozen=True)

    repository: Meta
    number: int
    keyword: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.repository}#{self.number}"
