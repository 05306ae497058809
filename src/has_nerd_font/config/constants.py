"""
Configuration constants for Nerd Font detection.

This module centralizes environment variable names, lookup tables and
file locations so the detection layers stay free of hardcoded values.
"""

# Explicit override toggle
OVERRIDE_VAR = "NERD_FONT"
OVERRIDE_TRUTHY = frozenset({"1", "true", "yes"})
OVERRIDE_FALSY = frozenset({"0", "false", "no"})

# Common environment variables
HOME_VAR = "HOME"
XDG_CONFIG_HOME_VAR = "XDG_CONFIG_HOME"

# Terminal identification
TERM_PROGRAM_VAR = "TERM_PROGRAM"
TERM_VAR = "TERM"

# Remote session markers (any non-empty value gates config inspection)
SSH_VARS = ("SSH_TTY", "SSH_CONNECTION", "SSH_CLIENT")

# VS Code fork detection
VSCODE_ASKPASS_VAR = "VSCODE_GIT_ASKPASS_NODE"

# Active iTerm2 profile name
ITERM_PROFILE_VAR = "ITERM_PROFILE"

# Known VS Code forks: (case-insensitive askpass substring, app directory).
# Checked in order; more specific substrings must come first.
VSCODE_FORKS = [
    ("codium", "VSCodium"),
    ("cursor", "Cursor"),
    ("code", "Code"),
]

# Config file locations (relative to HOME unless absolute)
ALACRITTY_SYSTEM_CONFIG = "/etc/alacritty/alacritty.toml"
ITERM2_PLIST = "Library/Preferences/com.googlecode.iterm2.plist"
TERMINAL_APP_PLIST = "Library/Preferences/com.apple.Terminal.plist"
MACOS_APP_SUPPORT = "Library/Application Support"
SETTINGS_FILE = "settings.json"
VSCODE_PROJECT_DIR = ".vscode"
ZED_PROJECT_DIR = ".zed"

# Font name tokens
NERD_FONT_PHRASES = ("Nerd Font", "NerdFont")
NERD_FONT_SUFFIXES = ("NF", "NFM", "NFP")

# Process exit codes
EXIT_OK = 0
EXIT_DISABLED = 1
EXIT_UNKNOWN_TERMINAL = 2
EXIT_REMOTE_SESSION = 3
EXIT_NO_RESOLVER = 4
EXIT_CONFIG_ERROR = 5
EXIT_NOT_NERD_FONT = 6
