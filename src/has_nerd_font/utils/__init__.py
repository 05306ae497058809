"""Utility modules for logging and plist decoding."""

from .logging import configure_logging, logger
from .plist import font_name_from_keyed_archive, parse_root_dictionary

__all__ = [
    "configure_logging",
    "logger",
    "font_name_from_keyed_archive",
    "parse_root_dictionary",
]
