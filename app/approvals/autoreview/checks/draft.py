"""Draft pull request check."""

from __future__ import annotations

from ..base import CheckResult
from ..context import CheckContext
from ..decision import SkipDraft


def check_draft(context: CheckContext) -> CheckResult:
    """Check if the pull request is still a draft."""
    if not context.configuration.skip_drafts:
        return CheckResult(
            check_id="draft",
            check_title="Draft pull request",
            status="skip",
            message="Draft pull requests are not skipped (skip-drafts is disabled).",
        )

    if context.snapshot.is_draft:
        decision = SkipDraft()
        return CheckResult(
            check_id="draft",
            check_title="Draft pull request",
            status="fail",
            message=decision.reason,
            decision=decision,
            should_stop=True,
        )

    return CheckResult(
        check_id="draft",
        check_title="Draft pull request",
        status="ok",
        message="The pull request is ready for review.",
    )
