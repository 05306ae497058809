"""
Per-terminal config resolvers and their dispatcher.

Each resolver is a plain function ``(env, cwd) -> DetectionResult``.
Supporting a new terminal means writing one resolver module and adding
one registry entry.
"""

from pathlib import Path

from ..env import EnvVars
from ..result import DetectionResult, DetectionSource
from ..terminal import Terminal, TerminalId
from ..utils.logging import logger
from . import alacritty, hyper, iterm2, terminal_app, vscode, zed
from .base import ConfigError, Resolver

_RESOLVER_REGISTRY: dict[Terminal, Resolver] = {
    Terminal.ALACRITTY: alacritty.resolve,
    Terminal.ITERM2: iterm2.resolve,
    Terminal.TERMINAL_APP: terminal_app.resolve,
    Terminal.VSCODE: vscode.resolve,
    Terminal.ZED: zed.resolve,
    Terminal.HYPER: hyper.resolve,
}


def register_resolver(terminal: Terminal, resolver: Resolver) -> None:
    """Register (or replace) the resolver for a terminal."""
    _RESOLVER_REGISTRY[terminal] = resolver


def resolver_for(terminal: TerminalId) -> Resolver | None:
    """
    Look up the resolver for a terminal identity.

    Returns:
        Resolver function, or None for terminals without one
        (including any UnknownTerminal)
    """
    if not isinstance(terminal, Terminal):
        return None
    return _RESOLVER_REGISTRY.get(terminal)


def list_supported_terminals() -> list[Terminal]:
    """Terminals that have a config resolver."""
    return list(_RESOLVER_REGISTRY.keys())


def resolve(terminal: TerminalId, env: EnvVars, cwd: Path) -> DetectionResult:
    """Route a terminal to its resolver, or report that none exists."""
    resolver = resolver_for(terminal)
    if resolver is None:
        logger.debug("no resolver for terminal %r", terminal)
        return DetectionResult(
            detected=None,
            source=DetectionSource.NO_RESOLVER,
            terminal=terminal,
        )
    return resolver(env, cwd)


__all__ = [
    "ConfigError",
    "Resolver",
    "list_supported_terminals",
    "register_resolver",
    "resolve",
    "resolver_for",
]
