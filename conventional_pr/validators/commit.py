"""Commit based validators."""

from ..constants import COMMIT_VALIDATOR_NAME, ERR_COMMIT_MISMATCH, ERR_UNSIGNED_COMMIT, SIGNED_VALIDATOR_NAME
from ..models import PullRequest, ValidationResult
from .base import Validator


class CommitValidator(Validator):
    """Checks every commit message against the commit pattern."""

    name = COMMIT_VALIDATOR_NAME

    def is_enabled(self) -> bool:
        return self.config.commit_pattern is not None

    def validate(self, pull_request: PullRequest) -> ValidationResult:
        if pull_request.commits is None:
            self.logger.warning("Commits of #%d are unavailable, skipping commit messages", pull_request.number)
            return self.success()

        for commit in pull_request.commits:
            if not self.config.commit_pattern.matches(commit.message):
                return self.failure(ERR_COMMIT_MISMATCH.format(sha=commit.short_sha))

        return self.success()


class SignedValidator(Validator):
    """Requires every commit to carry a verified signature."""

    name = SIGNED_VALIDATOR_NAME

    def is_enabled(self) -> bool:
        return self.config.signed

    def validate(self, pull_request: PullRequest) -> ValidationResult:
        if pull_request.commits is None:
            self.logger.warning("Commits of #%d are unavailable, skipping signatures", pull_request.number)
            return self.success()

        for commit in pull_request.commits:
            if not commit.verified:
                return self.failure(ERR_UNSIGNED_COMMIT.format(sha=commit.short_sha))

        return self.success()
