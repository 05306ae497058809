"""Command-line interface for has-nerd-font."""

from .parser import create_cli_parser
from .runner import emit_result, run_cli

__all__ = ["create_cli_parser", "emit_result", "run_cli"]
