from __future__ import annotations

import time
from typing import TYPE_CHECKING

from .checks import get_all_checks, get_metadata_checks
from .context import CheckContext
from .decision import Approve, Decision
from .utils.identity import DEFAULT_NOREPLY_HOST

if TYPE_CHECKING:
    from approvals.config import ApprovalConfiguration
    from approvals.services import PullRequestSnapshot


def _run_checks(checks: list[dict], context: CheckContext) -> dict:
    pipeline_start_time = time.perf_counter()

    tests = []
    for check_info in checks:
        check_start_time = time.perf_counter()
        result = check_info["function"](context)
        duration_ms = (time.perf_counter() - check_start_time) * 1000

        tests.append(result.as_test(duration_ms))

        if result.should_stop:
            total_duration_ms = (time.perf_counter() - pipeline_start_time) * 1000
            return {
                "tests": tests,
                "decision": result.decision,
                "total_duration_ms": total_duration_ms,
            }

    total_duration_ms = (time.perf_counter() - pipeline_start_time) * 1000
    return {
        "tests": tests,
        "decision": None,
        "total_duration_ms": total_duration_ms,
    }


def run_checks_pipeline(
    configuration: ApprovalConfiguration,
    snapshot: PullRequestSnapshot,
    *,
    noreply_host: str = DEFAULT_NOREPLY_HOST,
) -> dict:
    """Run all checks in order, stopping at the first one that skips approval."""
    context = CheckContext(
        configuration=configuration,
        snapshot=snapshot,
        noreply_host=noreply_host,
    )
    outcome = _run_checks(get_all_checks(), context)
    if outcome["decision"] is None:
        outcome["decision"] = Approve()
    return outcome


def run_metadata_checks(
    configuration: ApprovalConfiguration,
    snapshot: PullRequestSnapshot,
) -> dict:
    """Run the checks that do not need commits; a ``None`` decision means none of them skipped."""
    context = CheckContext(configuration=configuration, snapshot=snapshot)
    return _run_checks(get_metadata_checks(), context)


def decide(
    configuration: ApprovalConfiguration,
    snapshot: PullRequestSnapshot,
    *,
    noreply_host: str = DEFAULT_NOREPLY_HOST,
) -> Decision:
    """Decide whether the pull request can be approved automatically."""
    return run_checks_pipeline(configuration, snapshot, noreply_host=noreply_host)["decision"]
