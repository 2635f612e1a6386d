from __future__ import annotations

from ..base import CheckResult
from ..context import CheckContext
from ..decision import SkipEmptyCommitList


def check_empty_commits(context: CheckContext) -> CheckResult:
    """Check that the pull request has at least one commit."""
    if not context.snapshot.commits:
        decision = SkipEmptyCommitList()
        return CheckResult(
            check_id="empty-commits",
            check_title="Commit list",
            status="fail",
            message=decision.reason,
            decision=decision,
            should_stop=True,
        )

    return CheckResult(
        check_id="empty-commits",
        check_title="Commit list",
        status="ok",
        message=f"The pull request has {len(context.snapshot.commits)} commit(s).",
    )
