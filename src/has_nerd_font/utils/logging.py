"""
Shared logger for the detection pipeline.

The library only emits records; handlers are configured by the CLI.
"""

import logging

logger = logging.getLogger("has_nerd_font")
logger.addHandler(logging.NullHandler())


def configure_logging(verbose: bool = False) -> None:
    """Send pipeline debug output to stderr when requested."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(levelname)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )
