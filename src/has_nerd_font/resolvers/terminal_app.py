"""
Terminal.app config resolver.

The default profile is named by ``Default Window Settings``; its font is
either a plain string, an archived NSFont blob or a dictionary carrying a
``FontName`` key, depending on how the profile was written.
"""

from pathlib import Path
from typing import Any

from ..config.constants import TERMINAL_APP_PLIST
from ..env import EnvVars
from ..terminal import Terminal
from ..utils.plist import font_name_from_keyed_archive
from .base import (
    ConfigError,
    config_resolver,
    read_plist,
    require_home,
    require_macos,
    terminal_config_result,
)

FONT_KEYS = ("Font", "Normal Font")


def font_from_value(value: Any) -> str | None:
    """Decode a profile font entry in any of its stored shapes."""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return font_name_from_keyed_archive(value)
    if isinstance(value, dict):
        name = value.get("FontName")
        return name if isinstance(name, str) else None
    return None


def profile_font(settings: dict[str, Any]) -> str | None:
    for key in FONT_KEYS:
        font = font_from_value(settings.get(key))
        if font is not None:
            return font
    return None


@config_resolver(Terminal.TERMINAL_APP)
def resolve(env: EnvVars, cwd: Path):
    """Resolve the font of Terminal.app's default profile."""
    home = require_home(env)
    path = home / TERMINAL_APP_PLIST
    require_macos("Terminal.app", path)

    root = read_plist(path)
    if root is None:
        raise ConfigError("no config file found", path)

    profile = root.get("Default Window Settings")
    if not isinstance(profile, str) or not profile:
        raise ConfigError("missing Default Window Settings", path)

    window_settings = root.get("Window Settings")
    if not isinstance(window_settings, dict):
        raise ConfigError("missing Window Settings dictionary", path, profile)

    settings = window_settings.get(profile)
    if not isinstance(settings, dict):
        raise ConfigError(f"missing profile settings for {profile}", path, profile)

    font = profile_font(settings)
    if font is None:
        raise ConfigError(f"missing font descriptor for profile {profile}", path, profile)
    if not font.strip():
        raise ConfigError(f"empty font descriptor for profile {profile}", path, profile)

    return terminal_config_result(Terminal.TERMINAL_APP, font, path, profile)
