"""Matching of commits against the allowed bot identities."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from approvals.services import CommitRecord

DEFAULT_NOREPLY_HOST = "github.com"


def noreply_email_suffix(identity: str, noreply_host: str = DEFAULT_NOREPLY_HOST) -> str:
    """The platform no-reply address for an identity, e.g. ``bot@users.noreply.github.com``."""
    return f"{identity}@users.noreply.{noreply_host}"


def is_trusted_identity(identity: str, trusted_identities: Collection[str]) -> bool:
    """Exact, case-sensitive allow-list membership."""
    return identity in trusted_identities


def is_trusted_commit(
    commit: CommitRecord,
    trusted_identities: Collection[str],
    noreply_host: str = DEFAULT_NOREPLY_HOST,
) -> bool:
    """Check if a commit was made by one of the trusted identities.

    Any one of the linked login, the author name or a no-reply email is enough.
    """
    if commit.author_login and is_trusted_identity(commit.author_login, trusted_identities):
        return True

    if any(commit.committer_name == identity for identity in trusted_identities):
        return True

    if commit.committer_email and any(
        commit.committer_email.endswith(noreply_email_suffix(identity, noreply_host))
        for identity in trusted_identities
    ):
        return True

    return False


def find_untrusted_commit(
    commits: Iterable[CommitRecord],
    trusted_identities: Collection[str],
    noreply_host: str = DEFAULT_NOREPLY_HOST,
) -> CommitRecord | None:
    """Return the first commit not made by a trusted identity."""
    return next(
        (c for c in commits if not is_trusted_commit(c, trusted_identities, noreply_host)),
        None,
    )
