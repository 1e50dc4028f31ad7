"""Tooling backend and task dispatch.

Tooling tasks (build, serve, add, ...) are executed by an external
tooling executable. This module converts task requests into argument
vectors and guards dispatch with project-root checks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Protocol, Sequence

from core.config import JetConfig
from core.logging_config import get_logger
from core.process import spawn_command
from tooling.project_root import is_project_root, not_project_message

_LOGGER = get_logger(__name__)


class ToolingBackend(Protocol):
    """Operations the restore pipeline and CLI need from tooling."""

    def add(self, scope: str, names: Sequence[str]) -> None:
        """Add named items within a scope."""

    def run(
        self,
        task: str,
        scope: str | None,
        parameter: str | None,
        options: Mapping[str, object],
    ) -> None:
        """Run one tooling task."""


class CommandToolingBackend:
    """Tooling backend that shells out to the configured tooling executable."""

    def __init__(self, config: JetConfig) -> None:
        self._config = config

    def add(self, scope: str, names: Sequence[str]) -> None:
        """Run ``<tooling> add <scope> <names...>`` in the project root."""
        spawn_command(
            [self._config.tooling_command, "add", scope, *names],
            cwd=self._config.project_root,
        )

    def run(
        self,
        task: str,
        scope: str | None,
        parameter: str | None,
        options: Mapping[str, object],
    ) -> None:
        """Run ``<tooling> <task> [scope] [parameter] [--flags]`` in the project root."""
        argv = [self._config.tooling_command, task]
        if scope:
            argv.append(scope)
        if parameter:
            argv.append(parameter)
        argv.extend(build_option_flags(options))
        spawn_command(argv, cwd=self._config.project_root)


def build_option_flags(options: Mapping[str, object]) -> list[str]:
    """Render an options mapping as command-line flags.

    ``True`` becomes a bare ``--name``; ``False`` and ``None`` are dropped;
    other values render as ``--name=value``.
    """
    flags: list[str] = []
    for name, value in options.items():
        if value is None or value is False:
            continue
        if value is True:
            flags.append(f"--{name}")
            continue
        flags.append(f"--{name}={value}")
    return flags


def run_tooling(
    backend: ToolingBackend,
    project_root: Path,
    task: str,
    scope: str | None,
    parameter: str | None,
    options: Mapping[str, object] | None = None,
) -> bool:
    """Dispatch a tooling task when run from a project root.

    Failures are logged, not raised.

    Returns:
        True when the task was dispatched and completed.
    """
    task_options = dict(options or {})
    if "platform" in task_options:
        _LOGGER.error(
            "platform_flag_unsupported",
            task=task,
            message="Flag '--platform' is not supported. Use the platform name as "
            "parameter, e.g. 'jetkit tooling serve app ios'.",
        )
        return False
    if not is_project_root(project_root):
        _LOGGER.error("not_a_project", message=not_project_message(project_root))
        return False
    try:
        backend.run(task, scope, parameter, task_options)
    except Exception as error:  # noqa: BLE001 - tooling failures are reported, not raised
        _LOGGER.error("tooling_failed", task=task, scope=scope, error=str(error))
        return False
    return True
