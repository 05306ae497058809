"""
Alacritty config resolver.

Alacritty reads the first TOML file found in its lookup chain; the font
lives at ``font.normal.family``.
"""

from pathlib import Path

from ..config import constants
from ..env import EnvVars, env_nonempty
from ..terminal import Terminal
from .base import (
    ConfigError,
    config_resolver,
    nested_string,
    read_toml,
    require_home,
    terminal_config_result,
)


def candidate_paths(env: EnvVars, home: Path) -> list[Path]:
    """
    Build Alacritty's config lookup chain in priority order.

    The ``$HOME/.config`` fallback is only added when XDG_CONFIG_HOME is
    explicitly set, since otherwise it duplicates the first entries.
    """
    xdg_value = env_nonempty(env, constants.XDG_CONFIG_HOME_VAR)
    xdg_config_home = Path(xdg_value) if xdg_value else None
    if xdg_config_home is not None and not xdg_config_home.is_absolute():
        xdg_config_home = None

    config_home = xdg_config_home or home / ".config"

    candidates = [
        config_home / "alacritty" / "alacritty.toml",
        config_home / "alacritty.toml",
    ]
    if xdg_config_home is not None:
        candidates.append(home / ".config" / "alacritty" / "alacritty.toml")
    candidates.append(home / ".alacritty.toml")
    candidates.append(Path(constants.ALACRITTY_SYSTEM_CONFIG))
    return candidates


@config_resolver(Terminal.ALACRITTY)
def resolve(env: EnvVars, cwd: Path):
    """Resolve the Alacritty font from the first config file found."""
    home = require_home(env)

    for candidate in candidate_paths(env, home):
        config = read_toml(candidate)
        if config is None:
            continue

        family = nested_string(config, "font", "normal", "family")
        return terminal_config_result(Terminal.ALACRITTY, family, candidate)

    raise ConfigError("no config file found")
