from __future__ import annotations

from .github_client import GitHubClient
from .parsers import (
    load_event_payload,
    parse_commit,
    parse_pull_request,
    parse_repository,
    resolve_repository,
)
from .types import CommitRecord, PullRequestSnapshot, RepositoryRef

__all__ = [
    "GitHubClient",
    "CommitRecord",
    "PullRequestSnapshot",
    "RepositoryRef",
    "load_event_payload",
    "parse_commit",
    "parse_pull_request",
    "parse_repository",
    "resolve_repository",
]
