"""Component restore step.

Components recorded in the application config are re-added through the
tooling backend so their sources land back in the project.
"""

from __future__ import annotations

from typing import Mapping

from core.config import JetConfig
from core.constants import COMPONENT_SCOPE
from core.logging_config import get_logger
from restore.app_config import read_composites
from tooling.dispatcher import ToolingBackend

_LOGGER = get_logger(__name__)


def build_component_specs(composites: Mapping[str, str]) -> list[str]:
    """Build ``name@version`` strings in config order."""
    return [f"{name}@{version}" for name, version in composites.items()]


def add_components(config: JetConfig, tooling: ToolingBackend) -> None:
    """Forward configured components to the tooling ``add`` operation.

    Args:
        config: Runtime configuration.
        tooling: Backend performing the add.
    """
    composites = read_composites(config.app_config_path)
    if not composites:
        _LOGGER.info("no_components_to_add")
        return
    components = build_component_specs(composites)
    _LOGGER.info("components_adding", components=components)
    tooling.add(COMPONENT_SCOPE, components)
