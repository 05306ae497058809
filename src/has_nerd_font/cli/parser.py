"""Command-line argument parser for has-nerd-font."""

import argparse

from .. import __version__


def create_cli_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="has-nerd-font",
        description="Detect whether the current terminal uses a Nerd Font",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit codes:
  0  Nerd Font detected          4  terminal has no resolver
  1  disabled by NERD_FONT       5  configuration error
  2  unknown terminal            6  font is not a Nerd Font
  3  remote (SSH) session

Examples:
  # Use only the exit code
  has-nerd-font && echo "icons on"

  # Machine-readable result plus a human explanation
  has-nerd-font --json --explain
        """,
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the detection result as JSON on stdout",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print a one-line explanation on stderr",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log each detection step to stderr",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser
