"""
Test fixtures for has_nerd_font tests.

This module provides builders that write terminal configuration files
(TOML, JSON, JSONC and plist) into temporary home directories.
"""

from .configs import (
    alacritty_font_toml,
    hyper_font_json,
    iterm2_bookmark,
    keyed_archive_font,
    write_alacritty_config,
    write_hyper_config,
    write_iterm2_plist,
    write_plist,
    write_project_settings,
    write_terminal_app_plist,
    write_vscode_user_settings,
    write_zed_user_settings,
)

__all__ = [
    "alacritty_font_toml",
    "hyper_font_json",
    "iterm2_bookmark",
    "keyed_archive_font",
    "write_alacritty_config",
    "write_hyper_config",
    "write_iterm2_plist",
    "write_plist",
    "write_project_settings",
    "write_terminal_app_plist",
    "write_vscode_user_settings",
    "write_zed_user_settings",
]
