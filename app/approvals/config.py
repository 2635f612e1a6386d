"""Parsing of the string-typed action inputs into approval settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .exceptions import MissingInputError

TRUTHY_VALUES = frozenset({"true", "1", "yes", "y"})
FALSY_VALUES = frozenset({"false", "0", "no", "n"})

INPUT_GITHUB_TOKEN = "github-token"
INPUT_ALLOWED_BOT_LOGINS = "allowed-bot-logins"
INPUT_REQUIRE_PR_AUTHOR_IS_BOT = "require-pr-author-is-bot"
INPUT_SKIP_DRAFTS = "skip-drafts"
INPUT_SKIP_FORKS = "skip-forks"


def normalize_bool(raw: str | None, default: bool) -> bool:
    """
    Interpret a boolean-like string.

    Unrecognised values fall back to ``default`` instead of raising.
    """
    if not raw:
        return default
    value = str(raw).lower().strip()
    if value in TRUTHY_VALUES:
        return True
    if value in FALSY_VALUES:
        return False
    return default


def normalize_list(raw: str | None) -> list[str]:
    """Split a comma-separated string into trimmed, non-empty tokens."""
    if not raw:
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]


def input_variable_name(name: str) -> str:
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name: str, environ: Mapping[str, str] | None = None, *, required: bool = False) -> str:
    """Read an action input the way the Actions runner exposes it."""
    if environ is None:
        environ = os.environ
    value = (environ.get(input_variable_name(name)) or "").strip()
    if required and not value:
        raise MissingInputError(name)
    return value


@dataclass(frozen=True)
class ApprovalConfiguration:
    """Decision parameters for a single run."""

    trusted_identities: tuple[str, ...] = ()
    require_author_trusted: bool = True
    skip_drafts: bool = True
    skip_forks: bool = True


def load_configuration(inputs: Mapping[str, str | None]) -> ApprovalConfiguration:
    """Build the configuration from raw input strings keyed by input name."""
    return ApprovalConfiguration(
        trusted_identities=tuple(normalize_list(inputs.get(INPUT_ALLOWED_BOT_LOGINS))),
        require_author_trusted=normalize_bool(inputs.get(INPUT_REQUIRE_PR_AUTHOR_IS_BOT), True),
        skip_drafts=normalize_bool(inputs.get(INPUT_SKIP_DRAFTS), True),
        skip_forks=normalize_bool(inputs.get(INPUT_SKIP_FORKS), True),
    )
