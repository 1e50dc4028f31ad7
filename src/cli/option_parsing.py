"""Parsing of repeatable ``--option`` CLI arguments."""

from __future__ import annotations

import argparse
from typing import Sequence

from core.errors import JetConfigError


def add_option_argument(parser: argparse.ArgumentParser) -> None:
    """Register the repeatable ``--option`` argument on a parser."""
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        metavar="KEY[=VALUE]",
        help="Option forwarded to the generator or task; repeatable",
    )


def parse_options(raw_options: Sequence[str]) -> dict[str, object]:
    """Parse ``key=value`` and bare ``key`` items into an options mapping.

    Args:
        raw_options: Raw option strings from the command line.

    Returns:
        Options mapping; bare keys map to True.

    Raises:
        JetConfigError: If an item has an empty key.
    """
    options: dict[str, object] = {}
    for raw_option in raw_options:
        key, separator, value = raw_option.partition("=")
        key = key.strip()
        if not key:
            raise JetConfigError(
                f"Invalid --option '{raw_option}': expected KEY or KEY=VALUE."
            )
        options[key] = value if separator else True
    return options
