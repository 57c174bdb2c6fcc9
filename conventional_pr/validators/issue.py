"""Issue linkage validator.

A pull request is linked to an issue when GitHub already tracks a closing
reference to an issue of the same repository, or when its body contains a
closing keyword followed by an issue that exists, e.g. ``Fixes #12`` or
``Closes octo/tools#7``.

Lookup failures never reject a pull request: when GitHub cannot be asked,
the rule passes.
"""

import enum
import re
from typing import Any, Optional

import requests

from ..config import Configuration
from ..constants import ERR_NO_ISSUE, ISSUE_VALIDATOR_NAME
from ..github.client import GitHubAPIClient
from ..models import Issue, IssueReference, Meta, PullRequest, ValidationResult
from ..utils import get_logger
from .base import Validator

logger = get_logger(__name__)

KEYWORD_PATTERN = re.compile(
    r"\b(close|closes|closed|fix|fixes|fixed|resolve|resolves|resolved)"
    r"\s+(?:([\w.-]+)/([\w.-]+))?#([1-9]\d*)\b",
    re.IGNORECASE | re.MULTILINE,
)


class Resolution(enum.Enum):
    LINKED = "linked"
    NOT_LINKED = "not_linked"
    # GitHub could not be queried
    UNKNOWN = "unknown"


def extract_references(body: str, repository: Meta) -> list[IssueReference]:
    """Extract closing keyword references from a pull request body.

    Args:
    ----
        body: Pull request body
        repository: Repository of the pull request, used for ``#N`` references

    Returns:
    -------
        References in order of appearance

    """
    references = []
    for match in KEYWORD_PATTERN.finditer(body or ""):
        keyword, owner, name, number = match.groups()
        target = Meta(owner=owner, name=name) if owner else repository
        references.append(IssueReference(repository=target, number=int(number), keyword=keyword.lower()))

    return references


def _node_repository(node: Any) -> Optional[Meta]:
    """Repository of a closing reference node, None when it is incomplete."""
    if not isinstance(node, dict):
        return None
    repository = node.get("repository")
    if not isinstance(repository, dict) or not isinstance(repository.get("owner"), dict):
        return None
    owner = repository["owner"].get("login")
    name = repository.get("name")
    if not (owner and isinstance(owner, str) and name and isinstance(name, str)):
        return None
    return Meta(owner=owner, name=name)


class IssueReferenceResolver:
    """Decides whether a pull request is linked to an existing issue."""

    def __init__(self, client: GitHubAPIClient) -> None:
        self.client = client

    def resolve(self, pull_request: PullRequest) -> Resolution:
        """Resolve the issue linkage of a pull request.

        Args:
        ----
            pull_request: Pull request snapshot

        Returns:
        -------
            LINKED on the first resolved issue, UNKNOWN as soon as a lookup
            fails, NOT_LINKED otherwise

        """
        try:
            linked = self.client.get_issue_references(pull_request.repository, pull_request.number)
        except requests.RequestException:
            logger.exception("Failed to fetch issue references of #%d", pull_request.number)
            return Resolution.UNKNOWN

        for node in linked:
            repository = _node_repository(node)
            if repository is None:
                logger.debug("Skipping malformed issue reference %r", node)
                continue
            if repository == pull_request.repository:
                logger.debug("#%d is linked to issue #%s", pull_request.number, node.get("number"))
                return Resolution.LINKED

        for reference in extract_references(pull_request.body, pull_request.repository):
            try:
                data = self.client.get_issue(reference.repository, reference.number)
            except requests.RequestException:
                logger.exception("Failed to fetch issue %s", reference)
                return Resolution.UNKNOWN

            if data is None:
                logger.debug("Issue %s referenced by '%s' does not exist", reference, reference.keyword)
                continue

            issue = Issue.from_github_data(data, reference.repository)
            logger.debug("#%d %s issue %s#%d", pull_request.number, reference.keyword, issue.repository, issue.number)
            return Resolution.LINKED

        return Resolution.NOT_LINKED


class IssueValidator(Validator):
    """Requires the pull request to reference an issue."""

    name = ISSUE_VALIDATOR_NAME

    def __init__(self, config: Configuration, client: GitHubAPIClient) -> None:
        super().__init__(config)
        self.resolver = IssueReferenceResolver(client)

    def is_enabled(self) -> bool:
        return self.config.issue

    def validate(self, pull_request: PullRequest) -> ValidationResult:
        resolution = self.resolver.resolve(pull_request)

        if resolution is Resolution.UNKNOWN:
            logger.warning("Could not determine issue linkage of #%d, accepting it", pull_request.number)
        elif resolution is Resolution.NOT_LINKED:
            return self.failure(ERR_NO_ISSUE)

        return self.success()
