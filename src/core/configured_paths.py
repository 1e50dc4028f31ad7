"""Configured staging path resolution.

Projects may relocate their staging directories through the
``paths.staging`` section of the application config file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from core.constants import APP_CONFIG_JSON, DEFAULT_STAGING_HYBRID, DEFAULT_STAGING_WEB
from core.json_io import read_json_object
from core.types import ConfiguredPaths


def resolve_configured_paths(project_root: Path) -> ConfiguredPaths:
    """Resolve staging directories for a project root.

    Args:
        project_root: Application root directory.

    Returns:
        Absolute staging paths with defaults applied.
    """
    config_path = project_root / APP_CONFIG_JSON
    staging: Mapping[str, Any] = {}
    if config_path.exists():
        paths_section = read_json_object(config_path).get("paths")
        if isinstance(paths_section, Mapping) and isinstance(paths_section.get("staging"), Mapping):
            staging = paths_section["staging"]
    return ConfiguredPaths(
        staging_hybrid=project_root / _path_value(staging, "hybrid", DEFAULT_STAGING_HYBRID),
        staging_web=project_root / _path_value(staging, "web", DEFAULT_STAGING_WEB),
    )


def _path_value(section: Mapping[str, Any], key: str, default: str) -> str:
    value = section.get(key)
    return value if isinstance(value, str) and value else default
