"""
Detection result model.

A DetectionResult is the single output of the pipeline. It is immutable
and validates the relationships between ``source``, ``detected`` and
``error_reason`` on construction.
"""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from .config.constants import (
    EXIT_CONFIG_ERROR,
    EXIT_DISABLED,
    EXIT_NO_RESOLVER,
    EXIT_NOT_NERD_FONT,
    EXIT_OK,
    EXIT_REMOTE_SESSION,
    EXIT_UNKNOWN_TERMINAL,
)
from .terminal import TerminalId


class DetectionSource(Enum):
    """Pipeline layer that produced the final answer."""

    ENV_OVERRIDE_ENABLED = "env_override_enabled"
    ENV_OVERRIDE_DISABLED = "env_override_disabled"
    BUNDLED_TERMINAL = "bundled_terminal"
    UNKNOWN_TERMINAL = "unknown_terminal"
    REMOTE_SESSION = "remote_session"
    NO_RESOLVER = "no_resolver"
    CONFIG_ERROR = "config_error"
    TERMINAL_CONFIG = "terminal_config"


class Confidence(Enum):
    """How sure the pipeline is about a positive answer."""

    CERTAIN = "certain"
    PROBABLE = "probable"


# Sources whose ``detected`` value is fixed
_FIXED_DETECTED = {
    DetectionSource.ENV_OVERRIDE_ENABLED: True,
    DetectionSource.ENV_OVERRIDE_DISABLED: False,
    DetectionSource.BUNDLED_TERMINAL: True,
    DetectionSource.UNKNOWN_TERMINAL: None,
    DetectionSource.REMOTE_SESSION: None,
    DetectionSource.NO_RESOLVER: None,
    DetectionSource.CONFIG_ERROR: None,
}

_EXIT_CODES = {
    DetectionSource.ENV_OVERRIDE_ENABLED: EXIT_OK,
    DetectionSource.BUNDLED_TERMINAL: EXIT_OK,
    DetectionSource.ENV_OVERRIDE_DISABLED: EXIT_DISABLED,
    DetectionSource.UNKNOWN_TERMINAL: EXIT_UNKNOWN_TERMINAL,
    DetectionSource.REMOTE_SESSION: EXIT_REMOTE_SESSION,
    DetectionSource.NO_RESOLVER: EXIT_NO_RESOLVER,
    DetectionSource.CONFIG_ERROR: EXIT_CONFIG_ERROR,
}

_TERMINAL_CONFIG_EXIT_CODES = {
    True: EXIT_OK,
    False: EXIT_NOT_NERD_FONT,
    None: EXIT_CONFIG_ERROR,
}

_EXPLANATIONS = {
    DetectionSource.ENV_OVERRIDE_ENABLED: "detected Nerd Font from NERD_FONT override",
    DetectionSource.ENV_OVERRIDE_DISABLED: "Nerd Font explicitly disabled by NERD_FONT override",
    DetectionSource.BUNDLED_TERMINAL: "terminal ships with Nerd Font support by default",
    DetectionSource.UNKNOWN_TERMINAL: "cannot determine terminal; terminal is unknown",
    DetectionSource.REMOTE_SESSION: "running in remote session; local terminal config not inspected",
    DetectionSource.NO_RESOLVER: "known terminal has no resolver implemented yet",
}


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of a single detection run."""

    detected: bool | None
    source: DetectionSource
    terminal: TerminalId | None = None
    font: str | None = None
    config_path: Path | None = None
    profile: str | None = None
    error_reason: str | None = None
    confidence: Confidence = Confidence.CERTAIN

    def __post_init__(self):
        """Validate source-dependent invariants."""
        if self.source in _FIXED_DETECTED:
            expected = _FIXED_DETECTED[self.source]
            if self.detected is not expected:
                raise ValueError(
                    f"{self.source.value} requires detected={expected!r}, "
                    f"got {self.detected!r}"
                )

        if self.source is DetectionSource.CONFIG_ERROR:
            if not self.error_reason:
                raise ValueError("config_error requires an error_reason")
        elif self.error_reason is not None:
            raise ValueError(
                f"error_reason is only allowed for config_error, not {self.source.value}"
            )

    @property
    def exit_code(self) -> int:
        """Process exit code for this result."""
        if self.source is DetectionSource.TERMINAL_CONFIG:
            return _TERMINAL_CONFIG_EXIT_CODES[self.detected]
        return _EXIT_CODES[self.source]

    def explain(self) -> str:
        """One-line human-readable explanation of the result."""
        if self.source is DetectionSource.CONFIG_ERROR:
            return f"failed to read terminal configuration: {self.error_reason}"

        if self.source is DetectionSource.TERMINAL_CONFIG:
            if self.detected is True:
                return "terminal configuration indicates a Nerd Font is active"
            if self.detected is False:
                return "terminal configuration does not indicate a Nerd Font"
            return "terminal configuration status is unknown"

        return _EXPLANATIONS[self.source]

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to a JSON-ready dictionary.

        ``error_reason`` is omitted when absent; ``exit_code`` is included
        for consumers that only read the JSON.
        """
        data: dict[str, Any] = {
            "detected": self.detected,
            "source": self.source.value,
            "terminal": self.terminal.to_json() if self.terminal is not None else None,
            "font": self.font,
            "config_path": str(self.config_path) if self.config_path is not None else None,
            "profile": self.profile,
        }
        if self.error_reason is not None:
            data["error_reason"] = self.error_reason
        data["confidence"] = self.confidence.value
        data["exit_code"] = self.exit_code
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
