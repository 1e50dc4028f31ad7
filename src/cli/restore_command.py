"""Restore command wiring for jetkit CLI."""

from __future__ import annotations

from typing import Any

from sdk.app_client import AppClient


def add_restore_command(subparsers: Any) -> None:
    """Register restore subcommand."""
    subparsers.add_parser(
        "restore",
        help="Reinstall dependencies and regenerate scaffolding for an app",
    )


def run_restore_command(client: AppClient) -> int:
    """Run restore and map its outcome to an exit code."""
    return 0 if client.restore() else 1
