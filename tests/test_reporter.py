"""Unit tests for verdict reporting."""

from conventional_pr.constants import REPORT_MARKER
from conventional_pr.models import ValidationResult, Verdict
from conventional_pr.services.reporter import Reporter, format_report

FAILED = Verdict(
    results=(
        ValidationResult.success("Title"),
        ValidationResult.failure("Issue", "pull request does not reference any issue"),
        ValidationResult.inactive("Signed"),
    ),
)
PASSED = Verdict(results=(ValidationResult.success("Title"), ValidationResult.inactive("Signed")))


class TestFormatReport:
    """Test report rendering."""

    def test_failures_only(self, make_config) -> None:
        """Test that only failing rules are listed by default."""
        report = format_report(FAILED, make_config(message="Please read CONTRIBUTING.md"))

        assert report.startswith(REPORT_MARKER)
        assert "| Issue | :x: | pull request does not reference any issue |" in report
        assert "| Title |" not in report
        assert "Signed" not in report
        assert report.endswith("Please read CONTRIBUTING.md")

    def test_verbose(self, make_config) -> None:
        """Test that verbose reports list every active rule."""
        report = format_report(FAILED, make_config(verbose=True))

        assert "| Title | :white_check_mark: |  |" in report
        assert "| Issue | :x: |" in report
        assert "Signed" not in report

    def test_passing(self, make_config) -> None:
        """Test the report of a valid pull request."""
        report = format_report(PASSED, make_config(message="ignored on success"))

        assert "follows the conventions" in report
        assert "| Rule |" not in report
        assert "ignored on success" not in report


class TestReporter:
    """Test publishing verdicts."""

    def test_skipped_verdict_is_not_reported(self, make_config, mock_client, make_pull_request) -> None:
        """Test that gated runs leave the pull request alone."""
        Reporter(make_config(label="cpr:invalid"), mock_client).report(make_pull_request(), Verdict.skip("Bot", "bot"))

        mock_client.create_issue_comment.assert_not_called()
        mock_client.add_labels.assert_not_called()
        mock_client.remove_label.assert_not_called()

    def test_invalid_posts_comment_and_label(self, make_config, mock_client, make_pull_request, repository) -> None:
        """Test reporting an invalid pull request."""
        Reporter(make_config(label="cpr:invalid"), mock_client).report(make_pull_request(), FAILED)

        mock_client.create_issue_comment.assert_called_once()
        assert mock_client.create_issue_comment.call_args.args[:2] == (repository, 1)
        mock_client.add_labels.assert_called_once_with(repository, 1, ["cpr:invalid"])
        mock_client.get_issue_comments.assert_not_called()

    def test_invalid_edits_previous_report(self, make_config, mock_client, make_pull_request, repository) -> None:
        """Test that edit mode updates the latest report comment."""
        mock_client.get_issue_comments.return_value = [
            {"id": 1, "body": f"{REPORT_MARKER}\nold"},
            {"id": 2, "body": "LGTM"},
            {"id": 3, "body": f"{REPORT_MARKER}\nnewer"},
        ]

        Reporter(make_config(edit=True), mock_client).report(make_pull_request(), FAILED)

        mock_client.update_issue_comment.assert_called_once()
        assert mock_client.update_issue_comment.call_args.args[:2] == (repository, 3)
        mock_client.create_issue_comment.assert_not_called()
        mock_client.add_labels.assert_not_called()

    def test_invalid_edit_without_previous_report(self, make_config, mock_client, make_pull_request) -> None:
        """Test that edit mode posts when no report exists yet."""
        Reporter(make_config(edit=True), mock_client).report(make_pull_request(), FAILED)

        mock_client.create_issue_comment.assert_called_once()
        mock_client.update_issue_comment.assert_not_called()

    def test_valid_removes_label_silently(self, make_config, mock_client, make_pull_request, repository) -> None:
        """Test that a valid pull request only loses the label."""
        Reporter(make_config(label="cpr:invalid"), mock_client).report(make_pull_request(), PASSED)

        mock_client.remove_label.assert_called_once_with(repository, 1, "cpr:invalid")
        mock_client.create_issue_comment.assert_not_called()

    def test_valid_updates_previous_report(self, make_config, mock_client, make_pull_request, repository) -> None:
        """Test that a fixed pull request gets its report updated."""
        mock_client.get_issue_comments.return_value = [{"id": 9, "body": f"{REPORT_MARKER}\nfailed"}]

        Reporter(make_config(edit=True), mock_client).report(make_pull_request(), PASSED)

        body = mock_client.update_issue_comment.call_args.args[2]
        assert mock_client.update_issue_comment.call_args.args[:2] == (repository, 9)
        assert "follows the conventions" in body

    def test_valid_verbose_posts_report(self, make_config, mock_client, make_pull_request) -> None:
        """Test that verbose mode reports valid pull requests too."""
        Reporter(make_config(verbose=True), mock_client).report(make_pull_request(), PASSED)

        mock_client.create_issue_comment.assert_called_once()
