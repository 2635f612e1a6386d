"""Result type shared by the auto-approval checks."""

from __future__ import annotations

from dataclasses import dataclass

from .decision import Decision


@dataclass
class CheckResult:
    """Outcome of one check; ``should_stop`` ends the pipeline with ``decision``."""

    check_id: str
    check_title: str
    status: str
    message: str
    decision: Decision | None = None
    should_stop: bool = False

    def as_test(self, duration_ms: float) -> dict:
        return {
            "id": self.check_id,
            "title": self.check_title,
            "status": self.status,
            "message": self.message,
            "duration_ms": duration_ms,
        }
