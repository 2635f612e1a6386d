from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from approvals.config import ApprovalConfiguration
    from approvals.services import PullRequestSnapshot


@dataclass
class CheckContext:
    """Shared context passed to all check functions."""

    configuration: ApprovalConfiguration
    snapshot: PullRequestSnapshot
    noreply_host: str = "github.com"
