"""Autoreview decision dataclasses."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Decision(ABC):
    """Represents the outcome of evaluating a pull request."""

    status: ClassVar[str] = "skip"
    label: ClassVar[str] = "Not auto-approved"

    @property
    @abstractmethod
    def reason(self) -> str:
        ...

    @property
    def is_approval(self) -> bool:
        return self.status == "approve"


@dataclass(frozen=True)
class Approve(Decision):
    status: ClassVar[str] = "approve"
    label: ClassVar[str] = "Auto-approved"

    @property
    def reason(self) -> str:
        return "All commits on this PR were authored by allowed bots."

    @staticmethod
    def review_body(commit_count: int) -> str:
        return (
            f"Auto-approved: all {commit_count} commit(s) on this PR "
            "were authored by allowed bots."
        )


@dataclass(frozen=True)
class SkipDraft(Decision):
    @property
    def reason(self) -> str:
        return "PR is a draft; skipping auto-approval."


@dataclass(frozen=True)
class SkipFork(Decision):
    @property
    def reason(self) -> str:
        return "PR is from a fork; skipping auto-approval."


@dataclass(frozen=True)
class SkipUntrustedAuthor(Decision):
    identity: str

    @property
    def reason(self) -> str:
        return f"PR author {self.identity} is not in allowed-bot-logins; skipping."


@dataclass(frozen=True)
class SkipEmptyCommitList(Decision):
    @property
    def reason(self) -> str:
        return "No commits on this PR; skipping."


@dataclass(frozen=True)
class SkipUntrustedCommit(Decision):
    sha: str

    @property
    def reason(self) -> str:
        return f"Found commit not authored by allowed bots ({self.sha}); not auto-approving."
