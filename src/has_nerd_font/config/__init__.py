"""Detection constants, re-exported for `from has_nerd_font.config import ...`."""

from .constants import *  # noqa: F401, F403
