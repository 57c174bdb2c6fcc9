"""Pull request body validator."""

from ..constants import BODY_VALIDATOR_NAME, ERR_EMPTY_BODY
from ..models import PullRequest, ValidationResult
from .base import Validator


class BodyValidator(Validator):
    """Rejects pull requests without a description."""

    name = BODY_VALIDATOR_NAME

    def is_enabled(self) -> bool:
        return self.config.body

    def validate(self, pull_request: PullRequest) -> ValidationResult:
        if not pull_request.body.strip():
            return self.failure(ERR_EMPTY_BODY)

        return self.success()
