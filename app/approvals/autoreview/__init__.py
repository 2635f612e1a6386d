"""Logic for deciding whether a bot pull request can be approved automatically."""

from __future__ import annotations

from .decision import (
    Approve,
    Decision,
    SkipDraft,
    SkipEmptyCommitList,
    SkipFork,
    SkipUntrustedAuthor,
    SkipUntrustedCommit,
)
from .runner import decide, run_checks_pipeline, run_metadata_checks
from .utils.identity import find_untrusted_commit, is_trusted_commit, noreply_email_suffix

__all__ = [
    "Approve",
    "Decision",
    "SkipDraft",
    "SkipEmptyCommitList",
    "SkipFork",
    "SkipUntrustedAuthor",
    "SkipUntrustedCommit",
    "decide",
    "run_checks_pipeline",
    "run_metadata_checks",
    "find_untrusted_commit",
    "is_trusted_commit",
    "noreply_email_suffix",
]
