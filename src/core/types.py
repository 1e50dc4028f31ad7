"""Shared typed models.

This module defines immutable data models used by the restore pipeline,
generator dispatch, and SDK layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping


class RestoreType(str, Enum):
    """Project flavor detected once per restore run."""

    WEB = "web"
    HYBRID = "hybrid"


@dataclass(frozen=True)
class ConfiguredPaths:
    """Resolved staging directories for a project.

    Attributes:
        staging_hybrid: Platform toolchain project directory.
        staging_web: Web build output directory.
    """

    staging_hybrid: Path
    staging_web: Path


@dataclass(frozen=True)
class HooksConfig:
    """Lifecycle hook name to script path mapping."""

    hooks: Mapping[str, str]

    def hook_path(self, hook_name: str) -> str | None:
        """Return the configured script path for a hook, if any."""
        value = self.hooks.get(hook_name)
        if isinstance(value, str) and value:
            return value
        return None
