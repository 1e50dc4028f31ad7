"""Application config file reading and version stamping.

The config file holds component versions and the generator version
that last restored the project.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from core.constants import APP_CONFIG_JSON, GENERATOR_VERSION
from core.json_io import read_json_file, read_json_object, write_json_file
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def read_app_config(config_path: Path) -> dict[str, Any]:
    """Load the application config as a mapping.

    Args:
        config_path: Path to the application config file.

    Returns:
        Parsed config, or an empty mapping when the file is absent or is
        not a JSON object.
    """
    if not config_path.exists():
        return {}
    return read_json_object(config_path)


def read_composites(config_path: Path) -> dict[str, str]:
    """Return the component name to version specifier mapping."""
    composites = read_app_config(config_path).get("composites")
    if not isinstance(composites, Mapping):
        return {}
    return {str(name): str(version) for name, version in composites.items()}


def write_app_config(config_path: Path, generator_version: str = GENERATOR_VERSION) -> None:
    """Create the config file or stamp the current generator version into it.

    A missing file is created holding only the JSON-encoded version string,
    not an object. An existing object gets ``generatorVersion`` set and the
    whole file rewritten.

    Args:
        config_path: Path to the application config file.
        generator_version: Version to record.
    """
    _LOGGER.info("config_checked", file=APP_CONFIG_JSON)
    if not config_path.exists():
        _LOGGER.info("config_missing_adding_default", file=APP_CONFIG_JSON)
        write_json_file(config_path, generator_version)
        return
    _LOGGER.info("config_version_updated", file=APP_CONFIG_JSON, version=generator_version)
    payload = read_json_file(config_path)
    if not isinstance(payload, dict):
        _LOGGER.warning(
            "config_not_object_replaced",
            file=APP_CONFIG_JSON,
            found_type=type(payload).__name__,
        )
        payload = {}
    payload["generatorVersion"] = generator_version
    write_json_file(config_path, payload)
