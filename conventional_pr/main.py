"""Command line entry point, meant to run as a GitHub Actions step."""

import argparse
import json
import os
import sys
from pathlib import Path

import requests

from conventional_pr.config import read_config
from conventional_pr.exceptions import ConfigurationError
from conventional_pr.github.client import GitHubAPIClient
from conventional_pr.models import Meta
from conventional_pr.services.pull_request_loader import PullRequestLoader, load_event
from conventional_pr.services.reporter import Reporter
from conventional_pr.services.validation_runner import ValidationRunner
from conventional_pr.utils import get_logger

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="Validate a pull request against conventional PR rules")
    parser.add_argument(
        "--event-path",
        default=os.environ.get("GITHUB_EVENT_PATH"),
        help="GitHub event payload, defaults to $GITHUB_EVENT_PATH",
    )
    parser.add_argument(
        "--repository",
        default=os.environ.get("GITHUB_REPOSITORY"),
        help="Repository as owner/name, defaults to $GITHUB_REPOSITORY",
    )
    parser.add_argument("--number", type=int, help="Fetch this pull request instead of reading the event")
    parser.add_argument("--workers", type=int, default=1, help="Run validators in parallel with this many threads")
    parser.add_argument("--dry-run", action="store_true", help="Do not comment on or label the pull request")
    parser.add_argument("--json", action="store_true", help="Print the verdict as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run main function."""
    args = build_parser().parse_args(argv)

    try:
        config = read_config()
    except ConfigurationError:
        logger.exception("Invalid configuration")
        return EXIT_ERROR

    if not args.repository:
        logger.error("No repository given, use --repository or set GITHUB_REPOSITORY")
        return EXIT_ERROR

    try:
        repository = Meta.from_full_name(args.repository)
    except ValueError:
        logger.exception("Invalid repository")
        return EXIT_ERROR

    client = GitHubAPIClient.from_config(config)
    loader = PullRequestLoader(client)

    try:
        if args.number is not None:
            pull_request = loader.fetch(repository, args.number)
        else:
            if not args.event_path:
                logger.error("No event payload given, use --event-path or --number")
                return EXIT_ERROR
            event = load_event(Path(args.event_path))
            if "pull_request" not in event:
                logger.error("Event is not a pull request event")
                return EXIT_ERROR
            pull_request = loader.load(event["pull_request"], repository)
    except (OSError, ValueError, requests.RequestException):
        logger.exception("Failed to load the pull request")
        return EXIT_ERROR

    verdict = ValidationRunner(config, client, max_workers=args.workers).run(pull_request)

    if args.json:
        json.dump(verdict.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")

    if not args.dry_run:
        try:
            Reporter(config, client).report(pull_request, verdict)
        except requests.RequestException:
            logger.exception("Failed to report the verdict")

    for failure in verdict.failures:
        logger.error("%s: %s", failure.name, failure.error)

    return EXIT_VALID if verdict.passed else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
