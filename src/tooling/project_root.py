"""Project root recognition."""

from __future__ import annotations

from pathlib import Path

from core.constants import APP_CONFIG_JSON


def is_project_root(directory: Path) -> bool:
    """Return whether a directory holds an application config file."""
    return (directory / APP_CONFIG_JSON).is_file()


def not_project_message(directory: Path) -> str:
    """Build the error shown when tooling runs outside a project."""
    return (
        f"Current working directory '{directory}' is not an app: {APP_CONFIG_JSON} "
        "was not found. Run the command from the app root."
    )
