"""Python SDK for app commands.

This module exposes the operations a CLI layer consumes: app creation,
generator delegation, restore, and tooling dispatch. One client owns one
generator environment whose errors are logged.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Mapping

from core.config import JetConfig
from core.logging_config import get_logger
from generators.dispatch import create_app, delegate_to_generator
from generators.environment import GeneratorEnvironment
from restore.pipeline import restore_app
from tooling.dispatcher import CommandToolingBackend, ToolingBackend, run_tooling

_LOGGER = get_logger(__name__)


class AppClient:
    """Primary SDK entry point for app workflows."""

    def __init__(
        self,
        config: JetConfig | None = None,
        tooling: ToolingBackend | None = None,
        environment: GeneratorEnvironment | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            tooling: Optional tooling backend override.
            environment: Optional generator environment override.
        """
        self._config = config or JetConfig.from_env()
        self._tooling = tooling or CommandToolingBackend(self._config)
        self._environment = environment or GeneratorEnvironment(on_error=_log_generator_error)

    @property
    def config(self) -> JetConfig:
        """Runtime configuration used by this client."""
        return self._config

    def create(
        self,
        parameter: str | None = None,
        options: Mapping[str, object] | None = None,
    ) -> None:
        """Create a web or hybrid app through the generator environment."""
        create_app(self._environment, parameter, options)

    def delegate_to_generator(
        self,
        generator: str,
        parameter: str | None = None,
        options: Mapping[str, object] | None = None,
    ) -> None:
        """Run a named generator through the generator environment."""
        delegate_to_generator(self._environment, generator, parameter, options)

    def restore(self) -> bool:
        """Restore dependencies and scaffolding.

        Returns:
            True when every restore step completed.
        """
        return restore_app(self._config, self._tooling)

    def run_tooling(
        self,
        task: str,
        scope: str | None,
        parameter: str | None,
        options: Mapping[str, object] | None = None,
    ) -> bool:
        """Dispatch a tooling task for the project root."""
        return run_tooling(
            self._tooling,
            self._config.project_root,
            task,
            scope,
            parameter,
            options,
        )

    def with_project_root(self, project_root: str) -> "AppClient":
        """Clone the client with a different project root.

        Args:
            project_root: New project root path.

        Returns:
            New SDK client instance.
        """
        resolved_root = Path(project_root).expanduser().resolve()
        return AppClient(replace(self._config, project_root=resolved_root))


def _log_generator_error(error: Exception) -> None:
    _LOGGER.error("generator_failed", error=str(error))
