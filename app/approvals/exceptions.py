"""Errors that abort an approval run."""

from __future__ import annotations


class ApprovalError(Exception):
    """Base class for unrecoverable approval run failures."""


class MissingInputError(ApprovalError):
    """A required action input was not supplied."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Input required and not supplied: {name}")


class EventPayloadError(ApprovalError):
    """The triggering event payload could not be read."""


class GitHubAPIError(ApprovalError):
    """A request to the GitHub API failed."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
