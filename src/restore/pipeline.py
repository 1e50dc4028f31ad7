"""Restore orchestration for web and hybrid applications.

This module detects the project flavor and runs the ordered restore
steps. The first failing step stops the run; failures are logged and
reported through the return value instead of being raised.
"""

from __future__ import annotations

from typing import Callable

from core.config import JetConfig
from core.configured_paths import resolve_configured_paths
from core.constants import CORDOVA_CONFIG_XML
from core.logging_config import get_logger
from core.types import RestoreType
from restore.app_config import write_app_config
from restore.component_adder import add_components
from restore.dependency_installer import install_dependencies
from restore.hook_runner import run_after_app_restore_hook
from restore.platform_preparer import prepare_platform
from tooling.dispatcher import ToolingBackend

_LOGGER = get_logger(__name__)

RestoreStep = tuple[str, Callable[[], None]]


def detect_restore_type(config: JetConfig) -> RestoreType:
    """Return hybrid when the platform config marker exists, else web."""
    hybrid_dir = resolve_configured_paths(config.project_root).staging_hybrid
    if (hybrid_dir / CORDOVA_CONFIG_XML).exists():
        return RestoreType.HYBRID
    return RestoreType.WEB


def build_restore_steps(
    config: JetConfig,
    tooling: ToolingBackend,
    restore_type: RestoreType,
) -> list[RestoreStep]:
    """Build the ordered step list for one restore run."""
    steps: list[RestoreStep] = [
        ("install_dependencies", lambda: install_dependencies(config)),
        ("write_app_config", lambda: write_app_config(config.app_config_path)),
        ("add_components", lambda: add_components(config, tooling)),
    ]
    if restore_type is RestoreType.HYBRID:
        steps.append(("prepare_platform", lambda: prepare_platform(config)))
    steps.append(("run_after_app_restore_hook", lambda: run_after_app_restore_hook(config)))
    return steps


def restore_app(config: JetConfig, tooling: ToolingBackend) -> bool:
    """Restore dependencies and scaffolding for the project.

    Args:
        config: Runtime configuration.
        tooling: Backend used to re-add components.

    Returns:
        True when every step completed, False when a step failed.
    """
    current_step = "detect_restore_type"
    try:
        restore_type = detect_restore_type(config)
        _LOGGER.info("restore_started", restore_type=restore_type.value)
        for current_step, step in build_restore_steps(config, tooling, restore_type):
            step()
    except Exception as error:  # noqa: BLE001 - restore reports, never raises
        _LOGGER.error("restore_failed", step=current_step, error=str(error))
        return False
    _LOGGER.info("restore_completed", restore_type=restore_type.value)
    return True
