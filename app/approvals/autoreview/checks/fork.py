"""Fork origin check."""

from __future__ import annotations

from ..base import CheckResult
from ..context import CheckContext
from ..decision import SkipFork


def check_fork(context: CheckContext) -> CheckResult:
    """Check if the pull request head lives in a fork."""
    if not context.configuration.skip_forks:
        return CheckResult(
            check_id="fork",
            check_title="Fork origin",
            status="skip",
            message="Pull requests from forks are not skipped (skip-forks is disabled).",
        )

    if context.snapshot.is_from_fork:
        decision = SkipFork()
        return CheckResult(
            check_id="fork",
            check_title="Fork origin",
            status="fail",
            message=decision.reason,
            decision=decision,
            should_stop=True,
        )

    return CheckResult(
        check_id="fork",
        check_title="Fork origin",
        status="ok",
        message="The pull request comes from the base repository.",
    )
