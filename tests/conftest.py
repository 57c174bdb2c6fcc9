"""Test configuration and fixtures."""

import os
from collections.abc import Callable, Generator
from unittest.mock import Mock

import pytest

from conventional_pr.config import Configuration, get_config
from conventional_pr.github.client import GitHubAPIClient
from conventional_pr.models import Commit, Meta, PullRequest

ENV_KEYS = ("GITHUB_API_URL", "API_URL")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path) -> Generator[None, None, None]:
    """Remove action inputs from the environment and hide any .env file."""
    for key in list(os.environ):
        if key.upper().startswith("INPUT_") or key.upper() in ENV_KEYS:
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def repository() -> Meta:
    """Repository the pull requests under test belong to."""
    return Meta(owner="Namchee", name="conventional-pr")


@pytest.fixture
def make_config() -> Callable[..., Configuration]:
    """Build a configuration with every rule disabled unless overridden."""

    def _make_config(**overrides) -> Configuration:
        values = {
            "access_token": "test_token",
            "api_url": "https://api.github.com",
        }
        values.update(overrides)
        return Configuration(**values)

    return _make_config


@pytest.fixture
def make_pull_request(repository) -> Callable[..., PullRequest]:
    """Build a pull request snapshot with sensible defaults."""

    def _make_pull_request(**overrides) -> PullRequest:
        values = {
            "number": 1,
            "title": "feat: add validator",
            "body": "",
            "branch": "feat/validator",
            "author": "octocat",
            "repository": repository,
            "commits": (
                Commit(sha="a1b2c3d4e5f6", message="feat: add validator", verified=True),
            ),
        }
        values.update(overrides)
        return PullRequest(**values)

    return _make_pull_request


@pytest.fixture
def mock_client() -> Mock:
    """GitHub client double with no linked issues and no existing issues."""
    client = Mock(spec=GitHubAPIClient)
    client.get_issue_references.return_value = []
    client.get_issue.return_value = None
    client.get_issue_comments.return_value = []
    return client
