"""
Shared building blocks for per-terminal config resolvers.

Resolvers raise ConfigError internally; the ``config_resolver`` decorator
turns it into a ConfigError DetectionResult at the resolver boundary so
nothing escapes to the orchestrator.

Missing and permission-denied files are treated as absent. Files that
exist but cannot be read or parsed are fatal for the resolution attempt.
"""

import functools
import json
import os
import platform
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import json5

from ..config.constants import HOME_VAR, SETTINGS_FILE
from ..env import EnvVars, env_nonempty
from ..font import is_nerd_font, normalize_font_name
from ..result import DetectionResult, DetectionSource
from ..terminal import Terminal
from ..utils.logging import logger
from ..utils.plist import parse_root_dictionary

Resolver = Callable[[EnvVars, Path], DetectionResult]


class ConfigError(Exception):
    """A terminal configuration could not be used."""

    def __init__(
        self,
        reason: str,
        path: Path | None = None,
        profile: str | None = None,
    ):
        super().__init__(reason)
        self.reason = reason
        self.path = path
        self.profile = profile


def config_resolver(terminal: Terminal) -> Callable[[Resolver], Resolver]:
    """
    Decorate a resolver so ConfigError becomes a ConfigError result.

    Args:
        terminal: Terminal reported on error results
    """

    def decorator(func: Resolver) -> Resolver:
        @functools.wraps(func)
        def wrapper(env: EnvVars, cwd: Path) -> DetectionResult:
            try:
                return func(env, cwd)
            except ConfigError as e:
                logger.debug("%s config error: %s", terminal.value, e.reason)
                return DetectionResult(
                    detected=None,
                    source=DetectionSource.CONFIG_ERROR,
                    terminal=terminal,
                    config_path=e.path,
                    profile=e.profile,
                    error_reason=e.reason,
                )

        return wrapper

    return decorator


def require_home(env: EnvVars) -> Path:
    """Return HOME as a path, or raise if it is unset or empty."""
    home = env_nonempty(env, HOME_VAR)
    if home is None:
        raise ConfigError("HOME is not set")
    return Path(home)


def require_macos(name: str, path: Path) -> None:
    """Raise unless running on macOS, where plist preferences live."""
    if platform.system() != "Darwin":
        raise ConfigError(f"{name} resolver is only supported on macOS", path)


def read_config_bytes(path: Path) -> bytes | None:
    """
    Read a config file.

    Returns:
        File contents, or None if the file is missing or inaccessible

    Raises:
        ConfigError: If the file exists but cannot be read
    """
    try:
        return path.read_bytes()
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("config not found: %s", path)
        return None
    except PermissionError:
        logger.debug("config not accessible, skipping: %s", path)
        return None
    except OSError as e:
        raise ConfigError(f"failed to read {path}: {e.strerror or e}", path) from e


def _read_text(path: Path) -> str | None:
    data = read_config_bytes(path)
    if data is None:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConfigError(f"failed to read {path}: invalid UTF-8", path) from e


def _require_mapping(value: Any, path: Path) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"failed to parse {path}: root is not an object", path)
    return value


def read_toml(path: Path) -> dict[str, Any] | None:
    """Read and parse a TOML file; None if it does not exist."""
    text = _read_text(path)
    if text is None:
        return None
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"failed to parse {path}: {e}", path) from e
    except RecursionError as e:
        raise ConfigError(f"failed to parse {path}: nesting too deep", path) from e


def read_json(path: Path) -> dict[str, Any] | None:
    """Read and parse a strict JSON file; None if it does not exist."""
    text = _read_text(path)
    if text is None:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"failed to parse {path} at line {e.lineno} column {e.colno}: {e.msg}",
            path,
        ) from e
    except RecursionError as e:
        raise ConfigError(f"failed to parse {path}: nesting too deep", path) from e
    return _require_mapping(data, path)


def read_jsonc(path: Path) -> dict[str, Any] | None:
    """Read and parse a JSON-with-comments settings file."""
    text = _read_text(path)
    if text is None:
        return None
    try:
        data = json5.loads(text)
    except ValueError as e:
        raise ConfigError(f"failed to parse {path}: {e}", path) from e
    except RecursionError as e:
        raise ConfigError(f"failed to parse {path}: nesting too deep", path) from e
    return _require_mapping(data, path)


def read_plist(path: Path) -> dict[str, Any] | None:
    """Read a plist file and return its root dictionary."""
    data = read_config_bytes(path)
    if data is None:
        return None
    try:
        return parse_root_dictionary(data)
    except ValueError as e:
        raise ConfigError(str(e), path) from e


def nested_string(data: dict[str, Any] | None, *keys: str) -> str | None:
    """
    Follow a key path through nested tables.

    Returns:
        The string at the end of the path, or None if any step is missing
        or the final value is not a string
    """
    value: Any = data
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value if isinstance(value, str) else None


def find_project_settings(
    cwd: Path, home: Path, marker: str
) -> tuple[dict[str, Any] | None, Path | None]:
    """
    Walk upward from cwd looking for ``<dir>/<marker>/settings.json``.

    The walk checks HOME itself and then stops; when cwd lies outside HOME
    it stops at the filesystem root instead.

    Returns:
        Tuple of (parsed settings, settings path), or (None, None)
    """
    current = Path(os.path.abspath(cwd))
    home = Path(os.path.abspath(home))

    while True:
        candidate = current / marker / SETTINGS_FILE
        settings = read_jsonc(candidate)
        if settings is not None:
            logger.debug("found project settings: %s", candidate)
            return settings, candidate

        if current == home or current.parent == current:
            return None, None
        current = current.parent


def terminal_config_result(
    terminal: Terminal,
    font: str | None,
    config_path: Path | None,
    profile: str | None = None,
) -> DetectionResult:
    """
    Classify a configured font and build the final result.

    Raises:
        ConfigError: If no usable font name was configured
    """
    if font is None or not normalize_font_name(font):
        raise ConfigError("no font configured", config_path, profile)

    font = normalize_font_name(font)
    detected = is_nerd_font(font)
    logger.debug("%s font %r nerd_font=%s", terminal.value, font, detected)

    return DetectionResult(
        detected=detected,
        source=DetectionSource.TERMINAL_CONFIG,
        terminal=terminal,
        font=font,
        config_path=config_path,
        profile=profile,
    )


def layered_font(
    layers: list[tuple[dict[str, Any] | None, Path | None]],
    fields: list[tuple[str, ...]],
) -> tuple[str | None, Path | None]:
    """
    Pick a font from settings layers.

    Fields are tried in order and, for each field, layers are tried in
    order, so a more specific field in any layer beats a general one.
    Blank values mean "inherit" and fall through to the next candidate.

    Args:
        layers: (settings, path) pairs, highest precedence first
        fields: Key paths, most specific first

    Returns:
        Tuple of (font, path of the layer it came from); the font is None
        when no layer configures one, with the path of the first present layer
    """
    for keys in fields:
        for settings, path in layers:
            font = nested_string(settings, *keys)
            if font is not None and font.strip():
                return font, path

    present = [path for settings, path in layers if settings is not None]
    return None, present[0] if present else None


def resolve_layered_settings(
    terminal: Terminal,
    home: Path,
    cwd: Path,
    user_path: Path,
    project_marker: str,
    fields: list[tuple[str, ...]],
) -> DetectionResult:
    """
    Resolve a font from project settings over user settings.

    Raises:
        ConfigError: If a file is malformed, none exists, or no font is set
    """
    project_settings, project_path = find_project_settings(cwd, home, project_marker)
    user_settings = read_jsonc(user_path)

    if project_settings is None and user_settings is None:
        raise ConfigError("no settings file found")

    font, path = layered_font(
        [(project_settings, project_path), (user_settings, user_path)], fields
    )
    return terminal_config_result(terminal, font, path)
