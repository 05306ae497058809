"""
iTerm2 config resolver.

iTerm2 keeps its profiles ("bookmarks") in a preferences plist. The
active profile is taken from ITERM_PROFILE when set, otherwise from the
bookmark whose GUID matches ``Default Bookmark Guid``.
"""

from pathlib import Path
from typing import Any

from ..config.constants import ITERM2_PLIST, ITERM_PROFILE_VAR
from ..env import EnvVars, env_nonempty
from ..terminal import Terminal
from .base import (
    ConfigError,
    config_resolver,
    read_plist,
    require_home,
    require_macos,
    terminal_config_result,
)


def _split_point_size(font: str) -> str:
    """Drop the trailing point size iTerm2 appends ("HackNF-Regular 13")."""
    parts = font.strip().rsplit(" ", 1)
    if len(parts) == 2:
        try:
            float(parts[1])
        except ValueError:
            return font
        return parts[0]
    return font


def _non_empty_string(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _bookmarks(
    root: dict[str, Any], path: Path, profile_name: str | None = None
) -> list[dict[str, Any]]:
    bookmarks = root.get("New Bookmarks")
    if not isinstance(bookmarks, list):
        raise ConfigError("missing New Bookmarks array", path, profile_name)
    return [b for b in bookmarks if isinstance(b, dict)]


def select_bookmark(
    root: dict[str, Any], profile_name: str | None, path: Path
) -> dict[str, Any]:
    """
    Pick the active bookmark from the plist root.

    Raises:
        ConfigError: If the bookmark cannot be located
    """
    if profile_name:
        for bookmark in _bookmarks(root, path, profile_name):
            if bookmark.get("Name") == profile_name:
                return bookmark
        raise ConfigError(
            f"missing bookmark for profile {profile_name}", path, profile_name
        )

    default_guid = _non_empty_string(root.get("Default Bookmark Guid"))
    if default_guid is None:
        raise ConfigError("missing Default Bookmark Guid", path)

    for bookmark in _bookmarks(root, path):
        if bookmark.get("Guid") == default_guid:
            return bookmark
    raise ConfigError(f"missing bookmark for guid {default_guid}", path)


@config_resolver(Terminal.ITERM2)
def resolve(env: EnvVars, cwd: Path):
    """Resolve the font of the active iTerm2 profile."""
    home = require_home(env)
    path = home / ITERM2_PLIST
    require_macos("iTerm2", path)

    root = read_plist(path)
    if root is None:
        raise ConfigError("no config file found", path)

    bookmark = select_bookmark(root, env_nonempty(env, ITERM_PROFILE_VAR), path)
    profile = _non_empty_string(bookmark.get("Name"))

    font = bookmark.get("Normal Font")
    if not isinstance(font, str):
        raise ConfigError("missing Normal Font for active bookmark", path, profile)
    if not font.strip():
        raise ConfigError("empty Normal Font for active bookmark", path, profile)

    return terminal_config_result(
        Terminal.ITERM2, _split_point_size(font), path, profile
    )
