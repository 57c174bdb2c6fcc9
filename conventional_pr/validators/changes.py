"""Change size validator."""

from ..constants import ERR_TOO_MANY_CHANGES, FILE_CHANGES_VALIDATOR_NAME
from ..models import PullRequest, ValidationResult
from .base import Validator


class FileChangesValidator(Validator):
    """Limits the number of files a pull request may change."""

    name = FILE_CHANGES_VALIDATOR_NAME

    def is_enabled(self) -> bool:
        # 0 means unlimited
        return self.config.maximum_changes > 0

    def validate(self, pull_request: PullRequest) -> ValidationResult:
        if pull_request.changed_files > self.config.maximum_changes:
            return self.failure(
                ERR_TOO_MANY_CHANGES.format(
                    changes=pull_request.changed_files,
                    maximum=self.config.maximum_changes,
                ),
            )

        return self.success()
