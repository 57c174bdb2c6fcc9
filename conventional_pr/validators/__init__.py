"""
Pull request validators and gates
"""

from ..config import Configuration
from ..github.client import GitHubAPIClient
from .base import Validator
from .body import BodyValidator
from .branch import BranchValidator
from .changes import FileChangesValidator
from .commit import CommitValidator, SignedValidator
from .gates import BotGate, ClosedGate, DraftGate, Gate, IgnoredUserGate
from .issue import IssueReferenceResolver, IssueValidator, Resolution, extract_references
from .title import TitleValidator


def get_validators(config: Configuration, client: GitHubAPIClient) -> list[Validator]:
    """Build the default validator set, in reporting order."""
    return [
        TitleValidator(config),
        BodyValidator(config),
        BranchValidator(config),
        CommitValidator(config),
        SignedValidator(config),
        FileChangesValidator(config),
        IssueValidator(config, client),
    ]


def get_gates(config: Configuration) -> list[Gate]:
    """Build the default gate set, in evaluation order."""
    return [
        BotGate(config),
        IgnoredUserGate(config),
        DraftGate(config),
        ClosedGate(config),
    ]


__all__ = [
    "Validator",
    "TitleValidator",
    "BodyValidator",
    "BranchValidator",
    "CommitValidator",
    "SignedValidator",
    "FileChangesValidator",
    "IssueValidator",
    "IssueReferenceResolver",
    "Resolution",
    "extract_references",
    "Gate",
    "BotGate",
    "IgnoredUserGate",
    "DraftGate",
    "ClosedGate",
    "get_validators",
    "get_gates",
]
