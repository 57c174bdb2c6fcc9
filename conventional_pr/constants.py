"""Names and messages shared by validators, gates and the reporter."""

# Validators
TITLE_VALIDATOR_NAME = "Pull request has a valid title"
BODY_VALIDATOR_NAME = "Pull request has a non-empty body"
BRANCH_VALIDATOR_NAME = "Pull request has a valid branch name"
COMMIT_VALIDATOR_NAME = "All commits have valid messages"
SIGNED_VALIDATOR_NAME = "All commits are signed"
FILE_CHANGES_VALIDATOR_NAME = "Pull request does not introduce too many changes"
ISSUE_VALIDATOR_NAME = "Pull request references an issue"

# Gates
BOT_GATE_NAME = "Pull request is submitted by a bot"
IGNORED_USER_GATE_NAME = "Pull request is submitted by an ignored user"
DRAFT_GATE_NAME = "Pull request is a draft"
CLOSED_GATE_NAME = "Pull request is closed"

# Failure messages
ERR_NO_ISSUE = "pull request does not reference any issue"
ERR_EMPTY_BODY = "pull request does not have a body"
ERR_TITLE_MISMATCH = "pull request title `{title}` does not match the title pattern"
ERR_BRANCH_MISMATCH = "branch `{branch}` does not match the branch pattern"
ERR_COMMIT_MISMATCH = "commit {sha} does not have a valid commit message"
ERR_UNSIGNED_COMMIT = "commit {sha} is not signed"
ERR_TOO_MANY_CHANGES = "pull request changes {changes} files, more than the allowed {maximum}"

# Defaults
DEFAULT_API_URL = "https://api.github.com/"
REPORT_MARKER = "<!-- conventional-pr -->"
