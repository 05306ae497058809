"""
Environment snapshot helpers and the explicit override layer.

The environment is an ordered list of (key, value) pairs rather than a
mapping so that duplicate keys resolve to their last occurrence.
"""

import os
from collections.abc import Iterable, Sequence
from enum import Enum

from .config.constants import OVERRIDE_FALSY, OVERRIDE_TRUTHY, OVERRIDE_VAR

EnvVars = Sequence[tuple[str, str]]


class EnvDecision(Enum):
    """Outcome of the NERD_FONT override check."""

    ENABLED = "enabled"
    DISABLED = "disabled"
    CONTINUE = "continue"


def snapshot(env: Iterable[tuple[str, str]] | None = None) -> list[tuple[str, str]]:
    """Freeze an environment into an ordered list of pairs."""
    if env is None:
        env = os.environ.items()
    return [(str(key), str(value)) for key, value in env]


def env_value(env: EnvVars, key: str) -> str | None:
    """Return the last value set for key, or None if absent."""
    for k, v in reversed(env):
        if k == key:
            return v
    return None


def env_nonempty(env: EnvVars, key: str) -> str | None:
    """Return the last value for key only if it is non-empty."""
    value = env_value(env, key)
    return value if value else None


def detect_override(env: EnvVars) -> EnvDecision:
    """
    Inspect the NERD_FONT override variable.

    Tokens are compared trimmed and case-insensitively. Unrecognized
    values (including empty strings) do not decide anything.
    """
    raw = env_value(env, OVERRIDE_VAR)
    if raw is None:
        return EnvDecision.CONTINUE

    normalized = raw.strip().lower()
    if normalized in OVERRIDE_TRUTHY:
        return EnvDecision.ENABLED
    if normalized in OVERRIDE_FALSY:
        return EnvDecision.DISABLED
    return EnvDecision.CONTINUE
