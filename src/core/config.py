"""Runtime configuration model for jetkit.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    APP_CONFIG_JSON,
    DEFAULT_PACKAGE_MANAGER,
    DEFAULT_PLATFORM_TOOL,
    DEFAULT_PREPARE_MAX_BUFFER,
    DEFAULT_TOOLING_COMMAND,
    PATH_TO_HOOKS_CONFIG,
)
from core.errors import JetConfigError


@dataclass(frozen=True)
class JetConfig:
    """Validated runtime configuration.

    Attributes:
        project_root: Directory holding the application being restored.
        package_manager: Executable used for dependency installs.
        platform_tool: Mobile platform toolchain executable.
        tooling_command: Executable that runs tooling tasks.
        prepare_max_buffer: Output cap in bytes for platform prepare.
    """

    project_root: Path
    package_manager: str
    platform_tool: str
    tooling_command: str
    prepare_max_buffer: int

    @classmethod
    def from_env(cls) -> "JetConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            JetConfigError: If environment values are invalid.
        """
        project_root_value = os.getenv("JET_PROJECT_ROOT", os.getcwd())
        max_buffer_value = os.getenv("JET_PREPARE_MAX_BUFFER", str(DEFAULT_PREPARE_MAX_BUFFER))
        return cls(
            project_root=Path(project_root_value).expanduser().resolve(),
            package_manager=os.getenv("JET_PACKAGE_MANAGER", DEFAULT_PACKAGE_MANAGER),
            platform_tool=os.getenv("JET_PLATFORM_TOOL", DEFAULT_PLATFORM_TOOL),
            tooling_command=os.getenv("JET_TOOLING_COMMAND", DEFAULT_TOOLING_COMMAND),
            prepare_max_buffer=_parse_max_buffer(max_buffer_value),
        )

    @property
    def app_config_path(self) -> Path:
        """Path of the application configuration file."""
        return self.project_root / APP_CONFIG_JSON

    @property
    def hooks_config_path(self) -> Path:
        """Path of the lifecycle hooks configuration file."""
        return self.project_root / PATH_TO_HOOKS_CONFIG


def _parse_max_buffer(raw_value: str) -> int:
    """Parse the prepare output cap environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive byte count.

    Raises:
        JetConfigError: If value is not a positive integer.
    """
    try:
        max_buffer = int(raw_value)
    except ValueError as error:
        raise JetConfigError(
            "Invalid JET_PREPARE_MAX_BUFFER value: "
            f"expected integer, got '{raw_value}'. "
            "Set JET_PREPARE_MAX_BUFFER to a byte count."
        ) from error
    if max_buffer <= 0:
        raise JetConfigError(
            f"Invalid JET_PREPARE_MAX_BUFFER value: expected positive integer, got {max_buffer}."
        )
    return max_buffer
