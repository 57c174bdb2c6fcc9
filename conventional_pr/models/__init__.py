"""
Data models for conventional-pr
"""

from .issue import Issue, IssueReference
from .pull_request import Commit, PullRequest
from .repository import Meta
from .validation import ValidationResult, Verdict

__all__ = [
    "Meta",
    "Commit",
    "PullRequest",
    "Issue",
    "IssueReference",
    "ValidationResult",
    "Verdict",
]
