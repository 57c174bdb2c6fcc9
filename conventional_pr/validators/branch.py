"""Head branch name validator."""

from ..constants import BRANCH_VALIDATOR_NAME, ERR_BRANCH_MISMATCH
from ..models import PullRequest, ValidationResult
from .base import Validator


class BranchValidator(Validator):
    """Checks the head branch name against the branch pattern."""

    name = BRANCH_VALIDATOR_NAME

    def is_enabled(self) -> bool:
        return self.config.branch_pattern is not None

    def validate(self, pull_request: PullRequest) -> ValidationResult:
        if not self.config.branch_pattern.matches(pull_request.branch):
            return self.failure(ERR_BRANCH_MISMATCH.format(branch=pull_request.branch))

        return self.success()
