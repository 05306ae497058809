"""
Layered Nerd Font detection pipeline.

Layers run in fixed order and each returns either a final result or the
state carried into the next layer:

    override -> terminal identification -> remote-session gate -> resolver
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from . import resolvers
from .config.constants import SSH_VARS
from .env import EnvDecision, EnvVars, detect_override, env_nonempty, snapshot
from .result import DetectionResult, DetectionSource
from .terminal import TerminalId, TerminalOutcome, identify_terminal
from .utils.logging import logger

T = TypeVar("T")


@dataclass(frozen=True)
class LayerOutcome(Generic[T]):
    """Either a final result or state to pass to the next layer."""

    result: DetectionResult | None = None
    carry: T | None = None

    @classmethod
    def final(cls, result: DetectionResult) -> "LayerOutcome[T]":
        return cls(result=result)

    @classmethod
    def proceed(cls, carry: T | None = None) -> "LayerOutcome[T]":
        return cls(carry=carry)

    @property
    def is_final(self) -> bool:
        return self.result is not None


def env_layer(env: EnvVars) -> LayerOutcome[None]:
    """Finalize on an explicit NERD_FONT override."""
    decision = detect_override(env)
    if decision is EnvDecision.ENABLED:
        return LayerOutcome.final(
            DetectionResult(detected=True, source=DetectionSource.ENV_OVERRIDE_ENABLED)
        )
    if decision is EnvDecision.DISABLED:
        return LayerOutcome.final(
            DetectionResult(detected=False, source=DetectionSource.ENV_OVERRIDE_DISABLED)
        )
    return LayerOutcome.proceed()


def terminal_layer(env: EnvVars) -> LayerOutcome[TerminalId]:
    """Finalize for bundled or unknown terminals; otherwise carry the identity."""
    decision = identify_terminal(env)
    logger.debug("terminal decision: %s %r", decision.outcome.value, decision.terminal)

    if decision.outcome is TerminalOutcome.BUNDLED:
        return LayerOutcome.final(
            DetectionResult(
                detected=True,
                source=DetectionSource.BUNDLED_TERMINAL,
                terminal=decision.terminal,
            )
        )
    if decision.outcome is TerminalOutcome.UNKNOWN:
        return LayerOutcome.final(
            DetectionResult(detected=None, source=DetectionSource.UNKNOWN_TERMINAL)
        )
    return LayerOutcome.proceed(decision.terminal)


def is_remote_session(env: EnvVars) -> bool:
    return any(env_nonempty(env, var) for var in SSH_VARS)


def ssh_gate_layer(env: EnvVars, terminal: TerminalId) -> LayerOutcome[TerminalId]:
    """Stop before reading local config files inside an SSH session."""
    if is_remote_session(env):
        return LayerOutcome.final(
            DetectionResult(
                detected=None,
                source=DetectionSource.REMOTE_SESSION,
                terminal=terminal,
            )
        )
    return LayerOutcome.proceed(terminal)


def detect(
    env: Iterable[tuple[str, str]] | None = None,
    cwd: str | os.PathLike | None = None,
) -> DetectionResult:
    """
    Detect whether the current terminal session uses a Nerd Font.

    Never raises: every outcome, including configuration problems, is
    reported through the returned DetectionResult.

    Args:
        env: Ordered (key, value) pairs; defaults to the process environment.
            Later duplicates override earlier ones.
        cwd: Working directory for project settings lookup; defaults to
            the process working directory

    Returns:
        DetectionResult describing the answer and where it came from

    Example:
        >>> result = detect()
        >>> if result.detected:
        >>>     print("Nerd Font available")
    """
    env = snapshot(env)
    cwd = Path(cwd) if cwd is not None else Path.cwd()

    outcome = env_layer(env)
    if outcome.is_final:
        return outcome.result

    terminal_outcome = terminal_layer(env)
    if terminal_outcome.is_final:
        return terminal_outcome.result

    gate_outcome = ssh_gate_layer(env, terminal_outcome.carry)
    if gate_outcome.is_final:
        return gate_outcome.result

    return resolvers.resolve(gate_outcome.carry, env, cwd)
