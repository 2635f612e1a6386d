from __future__ import annotations

from ..base import CheckResult
from ..context import CheckContext
from ..decision import SkipUntrustedAuthor
from ..utils.identity import is_trusted_identity


def check_pr_author(context: CheckContext) -> CheckResult:
    """Check if the pull request was opened by an allowed bot."""
    if not context.configuration.require_author_trusted:
        return CheckResult(
            check_id="pr-author",
            check_title="Pull request author",
            status="skip",
            message="The pull request author is not required to be a bot.",
        )

    author = context.snapshot.author_login
    if not is_trusted_identity(author, context.configuration.trusted_identities):
        decision = SkipUntrustedAuthor(identity=author)
        return CheckResult(
            check_id="pr-author",
            check_title="Pull request author",
            status="fail",
            message=decision.reason,
            decision=decision,
            should_stop=True,
        )

    return CheckResult(
        check_id="pr-author",
        check_title="Pull request author",
        status="ok",
        message=f"The pull request author {author} is an allowed bot.",
    )
