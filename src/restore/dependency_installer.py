"""Package manager install step."""

from __future__ import annotations

from core.config import JetConfig
from core.logging_config import get_logger
from core.process import spawn_command

_LOGGER = get_logger(__name__)


def install_dependencies(config: JetConfig) -> None:
    """Run ``<package manager> install`` in the project root.

    Raises:
        ExecutionError: If the package manager exits non-zero.
    """
    _LOGGER.info("dependency_install_started", package_manager=config.package_manager)
    spawn_command([config.package_manager, "install"], cwd=config.project_root)
