"""Jetkit CLI entry points.

This module exposes restore, create, generate, and tooling commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from cli.create_command import (
    add_create_command,
    add_generate_command,
    run_create_command,
    run_generate_command,
)
from cli.restore_command import add_restore_command, run_restore_command
from cli.tooling_command import add_tooling_command, run_tooling_command
from core.config import JetConfig
from core.errors import JetError
from core.logging_config import get_logger
from sdk.app_client import AppClient

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="jetkit", description="App scaffolding command shim")
    parser.add_argument("--project-root", help="Override JET_PROJECT_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_restore_command(subparsers)
    add_create_command(subparsers)
    add_generate_command(subparsers)
    add_tooling_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the jetkit CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.project_root)
        return _dispatch(parser, client, args)
    except JetError as error:
        _LOGGER.error("command_failed", command=args.command, error=str(error))
        return 1


def _dispatch(parser: argparse.ArgumentParser, client: AppClient, args: argparse.Namespace) -> int:
    if args.command == "restore":
        return run_restore_command(client)
    if args.command == "create":
        return run_create_command(client, args)
    if args.command == "generate":
        return run_generate_command(client, args)
    if args.command == "tooling":
        return run_tooling_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(project_root: str | None) -> AppClient:
    """Build SDK client with optional project-root override.

    Args:
        project_root: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = JetConfig.from_env()
    if project_root:
        config = replace(config, project_root=Path(project_root).expanduser().resolve())
    return AppClient(config)
