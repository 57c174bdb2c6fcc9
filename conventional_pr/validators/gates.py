"""Gate predicates that exclude a pull request from validation."""

from abc import ABC, abstractmethod

from ..config import Configuration
from ..constants import BOT_GATE_NAME, CLOSED_GATE_NAME, DRAFT_GATE_NAME, IGNORED_USER_GATE_NAME
from ..models import PullRequest


class Gate(ABC):
    """An exclusion checked before any validator runs."""

    name: str = ""

    def __init__(self, config: Configuration) -> None:
        self.config = config

    @abstractmethod
    def is_enabled(self) -> bool:
        """Check whether this exclusion is switched on by the configuration."""

    @abstractmethod
    def applies_to(self, pull_request: PullRequest) -> bool:
        """Check whether the pull request falls under this exclusion."""

    @abstractmethod
    def reason(self, pull_request: PullRequest) -> str:
        """Human readable explanation of the exclusion."""

    def is_skipped(self, pull_request: PullRequest) -> bool:
        return self.is_enabled() and self.applies_to(pull_request)


class BotGate(Gate):
    name = BOT_GATE_NAME

    def is_enabled(self) -> bool:
        return self.config.bot

    def applies_to(self, pull_request: PullRequest) -> bool:
        return pull_request.author_is_bot

    def reason(self, pull_request: PullRequest) -> str:
        return f"{pull_request.author} is a bot"


class IgnoredUserGate(Gate):
    name = IGNORED_USER_GATE_NAME

    def is_enabled(self) -> bool:
        return bool(self.config.ignored_users)

    def applies_to(self, pull_request: PullRequest) -> bool:
        return pull_request.author in self.config.ignored_users

    def reason(self, pull_request: PullRequest) -> str:
        return f"{pull_request.author} is an ignored user"


class DraftGate(Gate):
    name = DRAFT_GATE_NAME

    def is_enabled(self) -> bool:
        return self.config.draft

    def applies_to(self, pull_request: PullRequest) -> bool:
        return pull_request.draft

    def reason(self, pull_request: PullRequest) -> str:
        return f"#{pull_request.number} is a draft"


class ClosedGate(Gate):
    name = CLOSED_GATE_NAME

    def is_enabled(self) -> bool:
        return self.config.close

    def applies_to(self, pull_request: PullRequest) -> bool:
        return pull_request.closed

    def reason(self, pull_request: PullRequest) -> str:
        return f"#{pull_request.number} is closed"
