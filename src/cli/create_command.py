"""Create and generate command wiring for jetkit CLI.

``create`` scaffolds a web or hybrid app; ``generate`` runs any
generator by name.
"""

from __future__ import annotations

import argparse
from typing import Any

from cli.option_parsing import add_option_argument, parse_options
from sdk.app_client import AppClient


def add_create_command(subparsers: Any) -> None:
    """Register create subcommand."""
    parser = subparsers.add_parser("create", help="Scaffold a new web or hybrid app")
    parser.add_argument("name", nargs="?", help="Optional app name")
    flavor = parser.add_mutually_exclusive_group()
    flavor.add_argument("--hybrid", action="store_true", help="Create a hybrid app")
    flavor.add_argument("--web", action="store_true", help="Create a web app (default)")
    add_option_argument(parser)


def add_generate_command(subparsers: Any) -> None:
    """Register generate subcommand."""
    parser = subparsers.add_parser("generate", help="Run a named generator")
    parser.add_argument("generator", help="Generator name, e.g. app or hybrid")
    parser.add_argument("parameter", nargs="?", help="Optional positional parameter")
    add_option_argument(parser)


def run_create_command(client: AppClient, args: argparse.Namespace) -> int:
    """Handle create command."""
    options = parse_options(args.option)
    if args.hybrid:
        options["hybrid"] = True
    if args.web:
        options["web"] = True
    client.create(args.name, options)
    return 0


def run_generate_command(client: AppClient, args: argparse.Namespace) -> int:
    """Handle generate command."""
    client.delegate_to_generator(args.generator, args.parameter, parse_options(args.option))
    return 0
