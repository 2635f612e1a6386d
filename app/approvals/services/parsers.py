from __future__ import annotations

import json
import logging
from pathlib import Path

from ..exceptions import EventPayloadError
from .types import CommitRecord, PullRequestSnapshot, RepositoryRef

logger = logging.getLogger(__name__)


def _nested(data: dict | None, *keys: str):
    value = data
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _nested_str(data: dict | None, *keys: str) -> str:
    value = _nested(data, *keys)
    return value if isinstance(value, str) else ""


def load_event_payload(path: str | Path | None) -> dict:
    """Read the JSON payload of the triggering event; missing path means no event."""
    if not path:
        logger.warning("No event payload path was provided.")
        return {}
    try:
        with open(path, encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError:
        logger.warning("Event payload file %s does not exist.", path)
        return {}
    except (OSError, ValueError) as e:
        raise EventPayloadError(f"Unable to read event payload {path}: {e}") from e
    if not isinstance(payload, dict):
        raise EventPayloadError(f"Event payload {path} is not a JSON object.")
    return payload


def parse_pull_request(pull_request: dict) -> PullRequestSnapshot:
    """Map the ``pull_request`` object of an event to a snapshot without commits."""
    number = pull_request.get("number")
    try:
        number = int(number)
    except (TypeError, ValueError):
        raise EventPayloadError(f"Pull request number is missing or invalid: {number!r}")

    return PullRequestSnapshot(
        number=number,
        is_draft=bool(pull_request.get("draft")),
        is_from_fork=bool(_nested(pull_request, "head", "repo", "fork")),
        author_login=_nested_str(pull_request, "user", "login"),
    )


def parse_commit(entry: dict) -> CommitRecord:
    """Map one entry of the pull request commit listing."""
    return CommitRecord(
        sha=str(entry.get("sha") or ""),
        author_login=_nested_str(entry, "author", "login"),
        committer_name=_nested_str(entry, "commit", "author", "name"),
        committer_email=_nested_str(entry, "commit", "author", "email"),
    )


def parse_repository(full_name: str | None) -> RepositoryRef | None:
    if not full_name or "/" not in full_name:
        return None
    owner, _, name = full_name.strip().partition("/")
    if not owner or not name:
        return None
    return RepositoryRef(owner=owner, name=name)


def resolve_repository(full_name: str | None, event: dict) -> RepositoryRef:
    """Resolve the target repository from ``owner/repo`` or the event payload."""
    repository = parse_repository(full_name) or parse_repository(
        _nested_str(event, "repository", "full_name")
    )
    if repository is None:
        raise EventPayloadError("Unable to determine the repository (owner/repo).")
    return repository
