"""has_nerd_font - detect whether the terminal is using a Nerd Font"""

__version__ = "0.1.0"

from .font import is_nerd_font, normalize_font_name
from .pipeline import detect
from .result import Confidence, DetectionResult, DetectionSource
from .terminal import Terminal, UnknownTerminal

__all__ = [
    "detect",
    "DetectionResult",
    "DetectionSource",
    "Confidence",
    "Terminal",
    "UnknownTerminal",
    "is_nerd_font",
    "normalize_font_name",
]
