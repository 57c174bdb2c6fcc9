"""Unit tests for building pull request snapshots."""

import json

import requests

from conventional_pr.services.pull_request_loader import PullRequestLoader, load_event

PULL_REQUEST = {
    "number": 12,
    "title": "feat: add loader",
    "body": "Fixes #3",
    "state": "open",
    "draft": False,
    "changed_files": 2,
    "user": {"login": "octocat", "type": "User"},
    "head": {"ref": "feat/loader"},
}
COMMITS = [{"sha": "abcdef0123", "commit": {"message": "feat: add loader", "verification": {"verified": True}}}]


class TestPullRequestLoader:
    """Test snapshot loading."""

    def test_load(self, mock_client, repository) -> None:
        """Test building a snapshot with its commits."""
        mock_client.get_commits.return_value = COMMITS

        pull_request = PullRequestLoader(mock_client).load(PULL_REQUEST, repository)

        mock_client.get_commits.assert_called_once_with(repository, 12)
        assert pull_request.number == 12
        assert pull_request.branch == "feat/loader"
        assert len(pull_request.commits) == 1
        assert pull_request.commits[0].verified

    def test_commit_fetch_failure(self, mock_client, repository) -> None:
        """Test that failing to fetch commits marks them unavailable."""
        mock_client.get_commits.side_effect = requests.ConnectionError("down")

        pull_request = PullRequestLoader(mock_client).load(PULL_REQUEST, repository)

        assert pull_request.commits is None
        assert pull_request.title == "feat: add loader"

    def test_fetch(self, mock_client, repository) -> None:
        """Test fetching a pull request by number."""
        mock_client.get_pull_request.return_value = PULL_REQUEST
        mock_client.get_commits.return_value = []

        pull_request = PullRequestLoader(mock_client).fetch(repository, 12)

        mock_client.get_pull_request.assert_called_once_with(repository, 12)
        assert pull_request.commits == ()


def test_load_event(tmp_path) -> None:
    """Test reading an event payload."""
    path = tmp_path / "event.json"
    path.write_text(json.dumps({"action": "opened", "pull_request": PULL_REQUEST}), encoding="utf-8")

    assert load_event(path)["pull_request"]["number"] == 12
