"""Builds pull request snapshots from events and the GitHub API."""

import json
from pathlib import Path
from typing import Any

import requests

from ..github.client import GitHubAPIClient
from ..models import Meta, PullRequest
from ..utils import get_logger

logger = get_logger(__name__)


def load_event(path: Path) -> dict[str, Any]:
    """
    Read a GitHub Actions event payload

    Args:
        path: Path of the event JSON file

    Returns:
        Event dictionary
    """
    with path.open(encoding="utf-8") as event_file:
        return json.load(event_file)


class PullRequestLoader:
    """Creates pull request snapshots, fetching their commits."""

    def __init__(self, client: GitHubAPIClient) -> None:
        self.client = client

    def load(self, github_data: dict[str, Any], repository: Meta) -> PullRequest:
        """Create a snapshot from a pull request object.

        The commit list of the snapshot is None when it cannot be fetched.
        """
        number = github_data["number"]

        try:
            commits = self.client.get_commits(repository, number)
        except requests.RequestException:
            logger.exception("Failed to fetch commits of %s#%d", repository, number)
            commits = None

        return PullRequest.from_github_data(github_data, repository, commits)

    def fetch(self, repository: Meta, number: int) -> PullRequest:
        """Create a snapshot of a pull request fetched from GitHub."""
        logger.info("Fetching %s#%d", repository, number)
        return self.load(self.client.get_pull_request(repository, number), repository)
