"""Zed settings resolver: ``terminal.font_family`` over ``buffer_font_family``."""

from pathlib import Path

from ..config.constants import SETTINGS_FILE, ZED_PROJECT_DIR
from ..env import EnvVars
from ..terminal import Terminal
from .base import config_resolver, require_home, resolve_layered_settings

FONT_FIELDS = [
    ("terminal", "font_family"),
    ("buffer_font_family",),
]


@config_resolver(Terminal.ZED)
def resolve(env: EnvVars, cwd: Path):
    home = require_home(env)

    return resolve_layered_settings(
        Terminal.ZED,
        home,
        cwd,
        home / ".config" / "zed" / SETTINGS_FILE,
        ZED_PROJECT_DIR,
        FONT_FIELDS,
    )
