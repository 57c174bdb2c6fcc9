"""Reports validation verdicts back to the pull request."""

from ..config import Configuration
from ..constants import REPORT_MARKER
from ..github.client import GitHubAPIClient
from ..models import PullRequest, Verdict
from ..utils import get_logger

logger = get_logger(__name__)


def format_report(verdict: Verdict, config: Configuration) -> str:
    """Render a verdict as a markdown comment.

    Args:
    ----
        verdict: Verdict of a validation run
        config: Action configuration, ``verbose`` lists passing rules too

    Returns:
    -------
        Comment body, starting with the report marker

    """
    lines = [REPORT_MARKER]

    if verdict.passed:
        lines.append("## :white_check_mark: Pull request follows the conventions")
    else:
        lines.append("## :x: Pull request does not follow the conventions")

    rows = verdict.active_results if config.verbose else verdict.failures
    if rows:
        lines.extend(["", "| Rule | Result | Reason |", "| --- | --- | --- |"])
        for result in rows:
            status = ":white_check_mark:" if result.passed else ":x:"
            lines.append(f"| {result.name} | {status} | {result.error or ''} |")

    if config.message and not verdict.passed:
        lines.extend(["", config.message])

    return "\n".join(lines)


class Reporter:
    """Posts comments and manages the invalid label."""

    def __init__(self, config: Configuration, client: GitHubAPIClient) -> None:
        self.config = config
        self.client = client

    def report(self, pull_request: PullRequest, verdict: Verdict) -> None:
        """Publish a verdict on the pull request.

        Args:
        ----
            pull_request: Validated pull request
            verdict: Verdict of the validation run

        """
        if verdict.skipped:
            logger.info("Not reporting skipped validation of #%d", pull_request.number)
            return

        body = format_report(verdict, self.config)
        previous = self._find_report(pull_request) if self.config.edit else None

        if verdict.passed:
            if self.config.label:
                self.client.remove_label(pull_request.repository, pull_request.number, self.config.label)
            if previous is not None or self.config.verbose:
                self._publish(pull_request, body, previous)
            return

        self._publish(pull_request, body, previous)
        if self.config.label:
            logger.info("Labelling #%d with '%s'", pull_request.number, self.config.label)
            self.client.add_labels(pull_request.repository, pull_request.number, [self.config.label])

    def _find_report(self, pull_request: PullRequest) -> dict | None:
        comments = self.client.get_issue_comments(pull_request.repository, pull_request.number)
        for comment in reversed(comments):
            if (comment.get("body") or "").startswith(REPORT_MARKER):
                return comment
        return None

    def _publish(self, pull_request: PullRequest, body: str, previous: dict | None) -> None:
        if previous is not None:
            logger.info("Updating report comment %s on #%d", previous["id"], pull_request.number)
            self.client.update_issue_comment(pull_request.repository, previous["id"], body)
        else:
            logger.info("Posting report on #%d", pull_request.number)
            self.client.create_issue_comment(pull_request.repository, pull_request.number, body)
