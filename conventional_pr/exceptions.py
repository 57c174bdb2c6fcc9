"""Exceptions raised by conventional-pr."""

import requests


class ConfigurationError(ValueError):
    """Base class for invalid or missing configuration."""


class MissingTokenError(ConfigurationError):
    """Raised when no access token is provided."""

    def __init__(self) -> None:
        super().__init__("access token is required")


class NegativeFileChangeError(ConfigurationError):
    """Raised when the maximum file changes threshold is negative."""

    def __init__(self) -> None:
        super().__init__("maximum file changes must not be negative")


class InvalidTitlePatternError(ConfigurationError):
    """Raised when the title pattern is not a valid regular expression."""


class InvalidCommitPatternError(ConfigurationError):
    """Raised when the commit pattern is not a valid regular expression."""


class InvalidBranchPatternError(ConfigurationError):
    """Raised when the branch pattern is not a valid regular expression."""


class InvalidBaseURLError(ConfigurationError):
    """Raised when the GitHub API URL is not an absolute URL."""


class GraphQLError(requests.RequestException):
    """GitHub GraphQL API answered with an ``errors`` payload."""
