"""Pull request title validator."""

from ..constants import ERR_TITLE_MISMATCH, TITLE_VALIDATOR_NAME
from ..models import PullRequest, ValidationResult
from .base import Validator


class TitleValidator(Validator):
    """Checks the pull request title against the title pattern."""

    name = TITLE_VALIDATOR_NAME

    def is_enabled(self) -> bool:
        return self.config.title_pattern is not None

    def validate(self, pull_request: PullRequest) -> ValidationResult:
        if not self.config.title_pattern.matches(pull_request.title):
            return self.failure(ERR_TITLE_MISMATCH.format(title=pull_request.title))

        return self.success()
