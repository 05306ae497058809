"""
Terminal emulator identification from environment signals.

Signals are checked in strict precedence order: TERM_PROGRAM, then TERM,
then terminal-specific marker variables.
"""

from dataclasses import dataclass
from enum import Enum

from .config.constants import TERM_PROGRAM_VAR, TERM_VAR
from .env import EnvVars, env_nonempty, env_value


class Terminal(Enum):
    """Terminal emulators known to the detector."""

    GHOSTTY = "ghostty"
    WEZTERM = "wezterm"
    KITTY = "kitty"
    OPENCODE = "opencode"
    CONDUCTOR = "conductor"
    ALACRITTY = "alacritty"
    ITERM2 = "iterm2"
    TERMINAL_APP = "terminal_app"
    VSCODE = "vscode"
    ZED = "zed"
    HYPER = "hyper"
    WINDOWS_TERMINAL = "windows_terminal"

    @property
    def is_bundled(self) -> bool:
        """Whether the terminal ships Nerd Font glyphs built in."""
        return self in BUNDLED_TERMINALS

    def to_json(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnknownTerminal:
    """An unrecognized TERM_PROGRAM value, kept verbatim for diagnostics."""

    name: str

    @property
    def is_bundled(self) -> bool:
        return False

    def to_json(self) -> dict[str, str]:
        return {"unknown": self.name}


TerminalId = Terminal | UnknownTerminal

BUNDLED_TERMINALS = frozenset(
    {
        Terminal.GHOSTTY,
        Terminal.WEZTERM,
        Terminal.KITTY,
        Terminal.OPENCODE,
        Terminal.CONDUCTOR,
    }
)

# Lowercased TERM_PROGRAM values
TERM_PROGRAM_NAMES = {
    "ghostty": Terminal.GHOSTTY,
    "wezterm": Terminal.WEZTERM,
    "kitty": Terminal.KITTY,
    "opencode": Terminal.OPENCODE,
    "conductor": Terminal.CONDUCTOR,
    "alacritty": Terminal.ALACRITTY,
    "apple_terminal": Terminal.TERMINAL_APP,
    "iterm.app": Terminal.ITERM2,
    "vscode": Terminal.VSCODE,
    "zed": Terminal.ZED,
    "hyper": Terminal.HYPER,
}

# Lowercased TERM values
TERM_NAMES = {
    "xterm-ghostty": Terminal.GHOSTTY,
    "wezterm": Terminal.WEZTERM,
    "xterm-kitty": Terminal.KITTY,
    "alacritty": Terminal.ALACRITTY,
}

# Marker variables in priority order
MARKER_VARS = [
    ("GHOSTTY_RESOURCES_DIR", Terminal.GHOSTTY),
    ("WEZTERM_PANE", Terminal.WEZTERM),
    ("KITTY_WINDOW_ID", Terminal.KITTY),
    ("KITTY_PID", Terminal.KITTY),
    ("ALACRITTY_WINDOW_ID", Terminal.ALACRITTY),
    ("ALACRITTY_LOG", Terminal.ALACRITTY),
    ("ALACRITTY_SOCKET", Terminal.ALACRITTY),
    ("ITERM_SESSION_ID", Terminal.ITERM2),
    ("ZED_TERM", Terminal.ZED),
    ("WT_SESSION", Terminal.WINDOWS_TERMINAL),
]


class TerminalOutcome(Enum):
    """How identification ended."""

    BUNDLED = "bundled"
    IDENTIFIED = "identified"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TerminalDecision:
    """Result of terminal identification."""

    outcome: TerminalOutcome
    terminal: TerminalId | None = None

    @classmethod
    def decide(cls, terminal: TerminalId) -> "TerminalDecision":
        """Classify a recognized terminal by its bundled-ness."""
        if terminal.is_bundled:
            return cls(TerminalOutcome.BUNDLED, terminal)
        return cls(TerminalOutcome.IDENTIFIED, terminal)


def from_term_program(value: str) -> Terminal | None:
    return TERM_PROGRAM_NAMES.get(value.strip().lower())


def from_term(value: str) -> Terminal | None:
    return TERM_NAMES.get(value.strip().lower())


def identify_terminal(env: EnvVars) -> TerminalDecision:
    """
    Identify the terminal emulator from environment signals.

    A set but unrecognized TERM_PROGRAM is preserved as UnknownTerminal so
    later layers can report "no resolver" rather than "unknown terminal".

    Args:
        env: Environment snapshot

    Returns:
        TerminalDecision: bundled, identified or unknown
    """
    term_program = env_value(env, TERM_PROGRAM_VAR)
    if term_program is not None and term_program.strip():
        terminal = from_term_program(term_program)
        if terminal is not None:
            return TerminalDecision.decide(terminal)
        return TerminalDecision(
            TerminalOutcome.IDENTIFIED, UnknownTerminal(term_program)
        )

    term = env_value(env, TERM_VAR)
    if term is not None:
        terminal = from_term(term)
        if terminal is not None:
            return TerminalDecision.decide(terminal)

    for var, terminal in MARKER_VARS:
        if env_nonempty(env, var):
            return TerminalDecision.decide(terminal)

    return TerminalDecision(TerminalOutcome.UNKNOWN)
