"""
VS Code (and fork) settings resolver.

The fork is recognized from the git askpass helper path VS Code exports
into its integrated terminal; that decides the user settings directory.
"""

import platform
from pathlib import Path

from ..config import constants
from ..env import EnvVars, env_nonempty
from ..terminal import Terminal
from .base import ConfigError, config_resolver, require_home, resolve_layered_settings

FONT_FIELDS = [
    ("terminal.integrated.fontFamily",),
    ("editor.fontFamily",),
]


def resolve_app_dir(env: EnvVars) -> str:
    """
    Map VSCODE_GIT_ASKPASS_NODE to the fork's application directory.

    Raises:
        ConfigError: If the variable is missing or matches no known fork
    """
    askpass = env_nonempty(env, constants.VSCODE_ASKPASS_VAR)
    if askpass is None:
        raise ConfigError(f"{constants.VSCODE_ASKPASS_VAR} is not set")

    askpass_lower = askpass.lower()
    for substring, app_dir in constants.VSCODE_FORKS:
        if substring in askpass_lower:
            return app_dir

    raise ConfigError(f"unrecognized {constants.VSCODE_ASKPASS_VAR}: {askpass}")


def user_settings_path(home: Path, app_dir: str) -> Path:
    """Platform-specific path of the fork's user settings.json."""
    if platform.system() == "Darwin":
        base = home / constants.MACOS_APP_SUPPORT
    else:
        base = home / ".config"
    return base / app_dir / "User" / constants.SETTINGS_FILE


@config_resolver(Terminal.VSCODE)
def resolve(env: EnvVars, cwd: Path):
    """Resolve the VS Code terminal font, project settings first."""
    home = require_home(env)
    app_dir = resolve_app_dir(env)

    return resolve_layered_settings(
        Terminal.VSCODE,
        home,
        cwd,
        user_settings_path(home, app_dir),
        constants.VSCODE_PROJECT_DIR,
        FONT_FIELDS,
    )
