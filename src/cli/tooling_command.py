"""Tooling command wiring for jetkit CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.option_parsing import add_option_argument, parse_options
from sdk.app_client import AppClient


def add_tooling_command(subparsers: Any) -> None:
    """Register tooling subcommand."""
    parser = subparsers.add_parser("tooling", help="Run a tooling task in the current app")
    parser.add_argument("task", help="Tooling task, e.g. build or serve")
    parser.add_argument("scope", nargs="?", help="Optional task scope, e.g. app or component")
    parser.add_argument("parameter", nargs="?", help="Optional parameter, e.g. platform name")
    add_option_argument(parser)


def run_tooling_command(client: AppClient, args: argparse.Namespace) -> int:
    """Handle tooling command."""
    options = parse_options(args.option)
    completed = client.run_tooling(args.task, args.scope, args.parameter, options)
    return 0 if completed else 1
