"""GitHub API client for pull request validation."""

import time
from typing import Any
from urllib.parse import quote, urljoin

import requests

from conventional_pr import __version__
from conventional_pr.config import Configuration
from conventional_pr.constants import DEFAULT_API_URL
from conventional_pr.exceptions import GraphQLError
from conventional_pr.models import Meta
from conventional_pr.utils import get_logger

logger = get_logger(__name__)

ISSUE_REFERENCES_QUERY = """
query($owner: String!, $name: String!, $number: Int!) {
  repository(owner: $owner, name: $name) {
    pullRequest(number: $number) {
      closingIssuesReferences(first: 100) {
        nodes {
          number
          repository {
            name
            owner { login }
          }
        }
      }
    }
  }
}
"""


class GitHubAPIClient:
    """GitHub API client with rate limiting and error handling."""

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        request_delay: float = 0.1,
    ) -> None:
        """Initialize GitHub API client.

        Args:
        ----
            access_token: GitHub token used for authentication
            base_url: REST API base URL, ending with a slash
            timeout: Timeout in seconds applied to every request
            request_delay: Minimum delay in seconds between requests

        """
        self.access_token = access_token
        self.base_url = base_url
        self.timeout = timeout
        self.session = requests.Session()

        self.session.headers.update({
            "Authorization": f"token {self.access_token}",
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": f"conventional-pr/{__version__}",
        })

        # Rate limiting
        self.rate_limit_remaining = None
        self.rate_limit_reset = None
        self.last_request_time = 0.0

        self.request_delay = request_delay

    @classmethod
    def from_config(cls, config: Configuration) -> "GitHubAPIClient":
        """Create a client from the action configuration."""
        return cls(config.access_token, config.api_url)

    @property
    def graphql_url(self) -> str:
        """GraphQL endpoint matching the REST base URL.

        GitHub Enterprise serves REST under ``/api/v3/`` and GraphQL under
        ``/api/graphql``.
        """
        if self.base_url.rstrip("/").endswith("/api/v3"):
            return urljoin(self.base_url, "../graphql")
        return urljoin(self.base_url, "graphql")

    def _check_rate_limit(self) -> None:
        """Check rate limit status and wait if necessary."""
        if self.rate_limit_remaining is not None and self.rate_limit_remaining <= 0:
            if self.rate_limit_reset:
                wait_time = self.rate_limit_reset - time.time()
                if wait_time > 0:
                    logger.info("Rate limit exceeded, waiting %.1f seconds", wait_time)
                    time.sleep(wait_time + 1)
            else:
                logger.info("Rate limit exceeded, waiting 60 seconds")
                time.sleep(60)

        # Enforce minimum delay between requests
        time_since_last_request = time.time() - self.last_request_time
        if time_since_last_request < self.request_delay:
            time.sleep(self.request_delay - time_since_last_request)

        self.last_request_time = time.time()

    def _make_request(self, method: str, url: str, **kwargs: Any) -> requests.Response:  # noqa: ANN401
        """Make HTTP request with rate limiting and error handling.

        Args:
        ----
            method: HTTP method (GET, POST, etc.)
            url: Request URL, absolute or relative to the base URL
            **kwargs: Additional request parameters

        Returns:
        -------
            requests.Response: Response object

        Raises:
        ------
            requests.RequestException: If request fails

        """
        self._check_rate_limit()

        if not url.startswith(("http://", "https://")):
            url = urljoin(self.base_url, url.lstrip("/"))

        kwargs.setdefault("timeout", self.timeout)

        logger.debug("Making %s request to %s", method, url)

        response = self.session.request(method, url, **kwargs)

        if "X-RateLimit-Remaining" in response.headers:
            self.rate_limit_remaining = int(response.headers["X-RateLimit-Remaining"])

        if "X-RateLimit-Reset" in response.headers:
            self.rate_limit_reset = int(response.headers["X-RateLimit-Reset"])

        if response.status_code == 403 and "rate limit" in response.text.lower():
            logger.warning("Rate limit exceeded")
            self._check_rate_limit()
            response = self.session.request(method, url, **kwargs)

        response.raise_for_status()

        return response

    def _get_paginated_results(self, url: str, params: dict | None = None) -> list[dict]:
        """Get all results from paginated endpoint.

        Args:
        ----
            url: API endpoint URL
            params: Query parameters

        Returns:
        -------
            List of all results

        """
        all_results = []
        page = 1
        per_page = 100

        while True:
            request_params = params.copy() if params else {}
            request_params.update({
                "page": page,
                "per_page": per_page,
            })

            response = self._make_request("GET", url, params=request_params)
            results = response.json()

            if not results:
                break

            all_results.extend(results)

            if len(results) < per_page:
                break

            page += 1

        return all_results

    def get_pull_request(self, repository: Meta, number: int) -> dict:
        """Get a pull request.

        Args:
        ----
            repository: Repository identity
            number: Pull request number

        Returns:
        -------
            Pull request dictionary

        """
        url = f"/repos/{repository.owner}/{repository.name}/pulls/{number}"

        response = self._make_request("GET", url)
        return response.json()

    def get_commits(self, repository: Meta, number: int) -> list[dict]:
        """Get the commits of a pull request.

        Args:
        ----
            repository: Repository identity
            number: Pull request number

        Returns:
        -------
            List of commit dictionaries

        """
        url = f"/repos/{repository.owner}/{repository.name}/pulls/{number}/commits"

        return self._get_paginated_results(url)

    def get_issue(self, repository: Meta, number: int) -> dict | None:
        """Get an issue.

        Args:
        ----
            repository: Repository identity
            number: Issue number

        Returns:
        -------
            Issue dictionary, or None when the issue does not exist or is not
            visible to the token

        Raises:
        ------
            requests.RequestException: If the lookup itself fails

        """
        url = f"/repos/{repository.owner}/{repository.name}/issues/{number}"

        try:
            response = self._make_request("GET", url)
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code in (404, 410):
                logger.debug("Issue %s#%d not found", repository, number)
                return None
            raise

        return response.json()

    def get_issue_references(self, repository: Meta, number: int) -> list[dict]:
        """Get the issues GitHub links to a pull request as closing references.

        Args:
        ----
            repository: Repository identity
            number: Pull request number

        Returns:
        -------
            List of issue nodes, each with ``number`` and ``repository``

        Raises:
        ------
            requests.RequestException: If the query fails, including GraphQL errors

        """
        payload = {
            "query": ISSUE_REFERENCES_QUERY,
            "variables": {
                "owner": repository.owner,
                "name": repository.name,
                "number": number,
            },
        }

        response = self._make_request("POST", self.graphql_url, json=payload)
        data = response.json()

        if data.get("errors"):
            messages = "; ".join(error.get("message", "unknown error") for error in data["errors"])
            raise GraphQLError(messages, response=response)

        pull_request = ((data.get("data") or {}).get("repository") or {}).get("pullRequest") or {}
        return (pull_request.get("closingIssuesReferences") or {}).get("nodes") or []

    def get_issue_comments(self, repository: Meta, number: int) -> list[dict]:
        """Get the comments of an issue or pull request.

        Args:
        ----
            repository: Repository identity
            number: Issue or pull request number

        Returns:
        -------
            List of issue comment dictionaries

        """
        url = f"/repos/{repository.owner}/{repository.name}/issues/{number}/comments"

        return self._get_paginated_results(url)

    def create_issue_comment(self, repository: Meta, number: int, body: str) -> dict:
        """Post a comment on an issue or pull request."""
        url = f"/repos/{repository.owner}/{repository.name}/issues/{number}/comments"

        response = self._make_request("POST", url, json={"body": body})
        return response.json()

    def update_issue_comment(self, repository: Meta, comment_id: int, body: str) -> dict:
        """Replace the body of an existing comment."""
        url = f"/repos/{repository.owner}/{repository.name}/issues/comments/{comment_id}"

        response = self._make_request("PATCH", url, json={"body": body})
        return response.json()

    def add_labels(self, repository: Meta, number: int, labels: list[str]) -> list[dict]:
        """Add labels to an issue or pull request, creating missing labels."""
        url = f"/repos/{repository.owner}/{repository.name}/issues/{number}/labels"

        response = self._make_request("POST", url, json={"labels": labels})
        return response.json()

    def remove_label(self, repository: Meta, number: int, label: str) -> bool:
        """Remove a label from an issue or pull request.

        Returns
        -------
            True if the label was removed, False if it was not applied

        """
        url = f"/repos/{repository.owner}/{repository.name}/issues/{number}/labels/{quote(label, safe='')}"

        try:
            self._make_request("DELETE", url)
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                return False
            raise

        return True
