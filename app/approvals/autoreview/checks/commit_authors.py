"""Commit authorship check."""

from __future__ import annotations

import logging

from ..base import CheckResult
from ..context import CheckContext
from ..decision import SkipUntrustedCommit
from ..utils.identity import find_untrusted_commit

logger = logging.getLogger(__name__)


def check_commit_authors(context: CheckContext) -> CheckResult:
    """Check that every commit was made by an allowed bot."""
    commits = context.snapshot.commits
    untrusted = find_untrusted_commit(
        commits, context.configuration.trusted_identities, context.noreply_host
    )
    if untrusted is not None:
        logger.debug(
            "Commit %s is untrusted (login=%r, name=%r, email=%r)",
            untrusted.sha,
            untrusted.author_login,
            untrusted.committer_name,
            untrusted.committer_email,
        )
        decision = SkipUntrustedCommit(sha=untrusted.sha)
        return CheckResult(
            check_id="commit-authors",
            check_title="Commit authors",
            status="fail",
            message=decision.reason,
            decision=decision,
            should_stop=True,
        )

    return CheckResult(
        check_id="commit-authors",
        check_title="Commit authors",
        status="ok",
        message=f"All {len(commits)} commit(s) were authored by allowed bots.",
    )
