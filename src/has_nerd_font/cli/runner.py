"""CLI runner: maps a detection result to output streams and an exit code."""

import argparse
import os
import sys
from collections.abc import Iterable
from typing import TextIO

from ..pipeline import detect
from ..result import DetectionResult
from ..utils.logging import configure_logging


def emit_result(
    result: DetectionResult,
    args: argparse.Namespace,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """
    Write the requested renderings of a result.

    JSON goes to stdout and the explanation to stderr, so both can be
    requested at once.

    Returns:
        Process exit code for the result
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if args.json:
        print(result.to_json(), file=stdout)
    if args.explain:
        print(result.explain(), file=stderr)

    return result.exit_code


def run_cli(
    args: argparse.Namespace,
    env: Iterable[tuple[str, str]] | None = None,
    cwd: str | os.PathLike | None = None,
) -> int:
    """Run detection for the current process and report it."""
    configure_logging(args.verbose)
    result = detect(env, cwd)
    return emit_result(result, args)
