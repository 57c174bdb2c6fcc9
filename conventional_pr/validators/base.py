"""Base class for pull request validators."""

from abc import ABC, abstractmethod

from ..config import Configuration
from ..models import PullRequest, ValidationResult
from ..utils import LoggerMixin


class Validator(ABC, LoggerMixin):
    """A single pull request rule.

    Subclasses implement :meth:`is_enabled` and :meth:`validate`. Callers use
    :meth:`is_valid`, which returns an inactive passing result for disabled
    rules without touching the pull request.
    """

    name: str = ""

    def __init__(self, config: Configuration) -> None:
        self.config = config

    @abstractmethod
    def is_enabled(self) -> bool:
        """Check whether this rule is switched on by the configuration."""

    @abstractmethod
    def validate(self, pull_request: PullRequest) -> ValidationResult:
        """Evaluate the rule against an enabled pull request."""

    def is_valid(self, pull_request: PullRequest) -> ValidationResult:
        """
        Evaluate the rule

        Args:
            pull_request: Pull request snapshot

        Returns:
            Validation result, inactive if the rule is disabled
        """
        if not self.is_enabled():
            return ValidationResult.inactive(self.name)

        return self.validate(pull_request)

    def success(self) -> ValidationResult:
        return ValidationResult.success(self.name)

    def failure(self, error: str) -> ValidationResult:
        return ValidationResult.failure(self.name, error)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(enabled={self.is_enabled()})>"
