from __future__ import annotations

from .commit_authors import check_commit_authors
from .draft import check_draft
from .empty_commits import check_empty_commits
from .fork import check_fork
from .pr_author import check_pr_author

AVAILABLE_CHECKS = [
    {
        "id": "draft",
        "name": "Draft pull request",
        "function": check_draft,
        "priority": 0,
        "requires_commits": False,
    },
    {
        "id": "fork",
        "name": "Fork origin",
        "function": check_fork,
        "priority": 1,
        "requires_commits": False,
    },
    {
        "id": "pr-author",
        "name": "Pull request author",
        "function": check_pr_author,
        "priority": 2,
        "requires_commits": False,
    },
    {
        "id": "empty-commits",
        "name": "Commit list",
        "function": check_empty_commits,
        "priority": 3,
        "requires_commits": True,
    },
    {
        "id": "commit-authors",
        "name": "Commit authors",
        "function": check_commit_authors,
        "priority": 4,
        "requires_commits": True,
    },
]


def get_all_checks():
    """Get all available checks sorted by priority."""
    return sorted(AVAILABLE_CHECKS, key=lambda c: c["priority"])


def get_check_by_id(check_id: str):
    """Get a specific check by ID."""
    return next((c for c in AVAILABLE_CHECKS if c["id"] == check_id), None)


def get_metadata_checks():
    """Get the checks that only need pull request metadata."""
    return [c for c in get_all_checks() if not c["requires_commits"]]
