"""Console entry point for has-nerd-font."""

import sys

from .cli import create_cli_parser, run_cli


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_cli_parser()
    args = parser.parse_args(argv)
    return run_cli(args)


if __name__ == "__main__":
    sys.exit(main())
