"""Hyper config resolver (``hyper.json``, font at ``config.fontFamily``)."""

from pathlib import Path

from ..config.constants import XDG_CONFIG_HOME_VAR
from ..env import EnvVars, env_nonempty
from ..terminal import Terminal
from .base import (
    ConfigError,
    config_resolver,
    nested_string,
    read_json,
    require_home,
    terminal_config_result,
)


def config_path(env: EnvVars, home: Path) -> Path:
    """Hyper 4 keeps its config under XDG_CONFIG_HOME, falling back to ~/.config."""
    xdg_config_home = env_nonempty(env, XDG_CONFIG_HOME_VAR)
    config_dir = Path(xdg_config_home) if xdg_config_home else home / ".config"
    return config_dir / "Hyper" / "hyper.json"


@config_resolver(Terminal.HYPER)
def resolve(env: EnvVars, cwd: Path):
    home = require_home(env)
    path = config_path(env, home)

    config = read_json(path)
    if config is None:
        raise ConfigError("no config file found", path)

    font = nested_string(config, "config", "fontFamily")
    return terminal_config_result(Terminal.HYPER, font, path)
