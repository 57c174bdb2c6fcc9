"""Validation result models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class ValidationResult(BaseModel):
    """Outcome of one validator for one pull request."""

    model_config = ConfigDict(frozen=True)

    name: str
    active: bool = True
    error: Optional[str] = None

    @model_validator(mode="after")
    def _inactive_results_pass(self) -> "ValidationResult":
        if not self.active and self.error is not None:
            msg = "inactive validation result cannot carry an error"
            raise ValueError(msg)
        return self

    @property
    def passed(self) -> bool:
        return self.error is None

    @classmethod
    def inactive(cls, name: str) -> "ValidationResult":
        return cls(name=name, active=False)

    @classmethod
    def success(cls, name: str) -> "ValidationResult":
        return cls(name=name)

    @classmethod
    def failure(cls, name: str, error: str) -> "ValidationResult":
        return cls(name=name, error=error)

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "name": self.name,
            "active": self.active,
            "passed": self.passed,
            "error": self.error,
        }


class Verdict(BaseModel):
    """Composite outcome of a validation run."""

    model_config = ConfigDict(frozen=True)

    results: tuple[ValidationResult, ...] = ()
    skipped_by: Optional[str] = None
    skip_reason: Optional[str] = None

    @classmethod
    def skip(cls, name: str, reason: str) -> "Verdict":
        """Verdict of a run stopped by a gate."""
        return cls(skipped_by=name, skip_reason=reason)

    @property
    def skipped(self) -> bool:
        return self.skipped_by is not None

    @property
    def active_results(self) -> list[ValidationResult]:
        return [result for result in self.results if result.active]

    @property
    def failures(self) -> list[ValidationResult]:
        return [result for result in self.active_results if not result.passed]

    @property
    def passed(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict[str, Any]:
        """Convert verdict to dictionary."""
        return {
            "passed": self.passed,
            "skipped": self.skipped,
            "skipped_by": self.skipped_by,
            "skip_reason": self.skip_reason,
            "results": [result.to_dict() for result in self.results],
        }
