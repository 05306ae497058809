"""
Font name heuristics.

Classifies a configured font name as a Nerd Font from its name alone.
Matching is case-sensitive on the canonical tokens.
"""

import re

from .config.constants import NERD_FONT_PHRASES, NERD_FONT_SUFFIXES

_TOKEN_SPLIT = re.compile(r"[^A-Za-z0-9]+")


def normalize_font_name(font: str) -> str:
    """Trim surrounding whitespace from a font name."""
    return font.strip()


def is_nerd_font(font: str) -> bool:
    """
    Check whether a font name looks like a patched Nerd Font.

    Accepts family names ("JetBrainsMono Nerd Font Mono") as well as
    PostScript-style names whose tokens end in NF, NFM or NFP
    ("JetBrainsMonoNFM-Regular", "MonaspiceNe NF").

    Args:
        font: Font name as read from a terminal config

    Returns:
        True if the name carries a Nerd Font marker
    """
    normalized = normalize_font_name(font)
    if any(phrase in normalized for phrase in NERD_FONT_PHRASES):
        return True

    return any(
        token.endswith(NERD_FONT_SUFFIXES)
        for token in _TOKEN_SPLIT.split(normalized)
        if token
    )
