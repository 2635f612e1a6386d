"""Approve the triggering pull request when all of its commits come from allowed bots."""

from __future__ import annotations

import dataclasses
import logging
import os

from django.core.management.base import BaseCommand, CommandError

from approvals.autoreview import run_checks_pipeline, run_metadata_checks
from approvals.autoreview.decision import Approve
from approvals.config import (
    INPUT_ALLOWED_BOT_LOGINS,
    INPUT_GITHUB_TOKEN,
    INPUT_REQUIRE_PR_AUTHOR_IS_BOT,
    INPUT_SKIP_DRAFTS,
    INPUT_SKIP_FORKS,
    get_input,
    load_configuration,
)
from approvals.services import (
    GitHubClient,
    load_event_payload,
    parse_pull_request,
    resolve_repository,
)
from approvals.services.github_client import get_noreply_host

logger = logging.getLogger(__name__)

OPTION_INPUTS = {
    "allowed_bot_logins": INPUT_ALLOWED_BOT_LOGINS,
    "require_pr_author_is_bot": INPUT_REQUIRE_PR_AUTHOR_IS_BOT,
    "skip_drafts": INPUT_SKIP_DRAFTS,
    "skip_forks": INPUT_SKIP_FORKS,
}


class Command(BaseCommand):
    help = (
        "Approve the pull request of the triggering GitHub event when every commit "
        "was authored by an allowed bot."
    )

    def add_arguments(self, parser):
        parser.add_argument("--github-token", help="Token used for GitHub API calls")
        parser.add_argument(
            "--allowed-bot-logins",
            help="Comma-separated logins of bots whose pull requests may be approved",
        )
        parser.add_argument(
            "--require-pr-author-is-bot",
            help="Require the pull request author to be an allowed bot (default: true)",
        )
        parser.add_argument("--skip-drafts", help="Skip draft pull requests (default: true)")
        parser.add_argument(
            "--skip-forks", help="Skip pull requests from forks (default: true)"
        )
        parser.add_argument(
            "--event-path",
            help="Path to the event payload (defaults to GITHUB_EVENT_PATH)",
        )
        parser.add_argument(
            "--repository",
            help="Repository as owner/repo (defaults to GITHUB_REPOSITORY)",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Evaluate the pull request without submitting a review",
        )

    def handle(self, *args, **options):
        try:
            self._run(options, os.environ)
        except Exception as e:
            logger.error("Auto-approval failed: %s", e)
            self.stdout.write(f"::error::{e}")
            raise CommandError(str(e)) from e

    def _collect_inputs(self, options, environ) -> dict[str, str]:
        inputs = {}
        for option, name in OPTION_INPUTS.items():
            value = options.get(option)
            inputs[name] = value if value is not None else get_input(name, environ)
        return inputs

    def _log_checks(self, outcome):
        for test in outcome["tests"]:
            logger.debug(
                "Check %s [%s]: %s (%.1f ms)",
                test["id"],
                test["status"],
                test["message"],
                test["duration_ms"],
            )
        logger.debug(
            "Ran %d check(s) in %.1f ms", len(outcome["tests"]), outcome["total_duration_ms"]
        )

    def _log_decision(self, decision):
        logger.info("%s: %s", decision.label, decision.reason)

    def _run(self, options, environ):
        token = (options.get("github_token") or "").strip() or get_input(
            INPUT_GITHUB_TOKEN, environ, required=True
        )
        inputs = self._collect_inputs(options, environ)
        configuration = load_configuration(inputs)

        event = load_event_payload(options.get("event_path") or environ.get("GITHUB_EVENT_PATH"))
        pull_request = event.get("pull_request")
        if not pull_request:
            logger.info("No pull_request in context; exiting.")
            return

        snapshot = parse_pull_request(pull_request)
        outcome = run_metadata_checks(configuration, snapshot)
        self._log_checks(outcome)
        if outcome["decision"] is not None:
            self._log_decision(outcome["decision"])
            return

        repository = resolve_repository(
            options.get("repository") or environ.get("GITHUB_REPOSITORY"), event
        )
        client = GitHubClient(token)
        commits = client.list_pull_request_commits(repository, snapshot.number)
        snapshot = dataclasses.replace(snapshot, commits=tuple(commits))

        outcome = run_checks_pipeline(configuration, snapshot, noreply_host=get_noreply_host())
        self._log_checks(outcome)
        decision = outcome["decision"]
        if not isinstance(decision, Approve):
            self._log_decision(decision)
            return

        logger.info(
            "%s: all %d commit(s) are from allowed bots [%s]; creating approval review.",
            decision.label,
            len(snapshot.commits),
            ", ".join(configuration.trusted_identities),
        )
        if options.get("dry_run"):
            logger.info(
                "Dry run; not submitting a review for %s#%s.",
                repository.full_name,
                snapshot.number,
            )
            return

        client.approve_pull_request(
            repository, snapshot.number, Approve.review_body(len(snapshot.commits))
        )
        self.stdout.write(
            self.style.SUCCESS(f"Approved {repository.full_name}#{snapshot.number}")
        )
