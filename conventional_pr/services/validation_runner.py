"""Validation orchestration for a single pull request."""

from concurrent.futures import ThreadPoolExecutor

from ..config import Configuration
from ..github.client import GitHubAPIClient
from ..models import PullRequest, ValidationResult, Verdict
from ..utils import get_logger
from ..validators import Gate, Validator, get_gates, get_validators

logger = get_logger(__name__)


class ValidationRunner:
    """Runs gates, then every validator, and folds the results into a verdict."""

    def __init__(
        self,
        config: Configuration,
        client: GitHubAPIClient,
        validators: list[Validator] | None = None,
        gates: list[Gate] | None = None,
        max_workers: int = 1,
    ) -> None:
        """Initialize validation runner.

        Args:
        ----
            config: Action configuration
            client: GitHub API client used by validators that need lookups
            validators: Validators to run, defaults to the full rule set
            gates: Exclusions checked first, defaults to all gates
            max_workers: Validators run in a thread pool of this size when above 1

        """
        self.config = config
        self.validators = validators if validators is not None else get_validators(config, client)
        self.gates = gates if gates is not None else get_gates(config)
        self.max_workers = max_workers

    def run(self, pull_request: PullRequest) -> Verdict:
        """Validate a pull request.

        Args:
        ----
            pull_request: Pull request snapshot

        Returns:
        -------
            Skipped verdict if a gate applies, otherwise the verdict of all validators

        """
        logger.info("Validating %s#%d", pull_request.repository, pull_request.number)

        for gate in self.gates:
            if gate.is_skipped(pull_request):
                reason = gate.reason(pull_request)
                logger.info("Skipping validation: %s", reason)
                return Verdict.skip(gate.name, reason)

        results = self._run_validators(pull_request)
        for result in results:
            logger.debug(
                "%s: %s",
                result.name,
                "inactive" if not result.active else result.error or "passed",
            )

        verdict = Verdict(results=tuple(results))
        if verdict.passed:
            logger.info("#%d passed %d active rules", pull_request.number, len(verdict.active_results))
        else:
            logger.info(
                "#%d failed %d of %d active rules",
                pull_request.number,
                len(verdict.failures),
                len(verdict.active_results),
            )

        return verdict

    def _run_validators(self, pull_request: PullRequest) -> list[ValidationResult]:
        if self.max_workers <= 1 or len(self.validators) <= 1:
            return [validator.is_valid(pull_request) for validator in self.validators]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(executor.map(lambda validator: validator.is_valid(pull_request), self.validators))
