"""Public SDK surface for jetkit.

This module provides a stable import path for SDK users.
It re-exports the primary client and typed models.
"""

from __future__ import annotations

from core.config import JetConfig
from core.errors import (
    ExecutionError,
    GeneratorError,
    HookError,
    JetConfigError,
    JetError,
    PlatformPrepareError,
)
from core.types import ConfiguredPaths, HooksConfig, RestoreType
from generators.environment import GeneratorEnvironment
from restore.pipeline import detect_restore_type, restore_app
from sdk.app_client import AppClient

__all__ = [
    "AppClient",
    "ConfiguredPaths",
    "ExecutionError",
    "GeneratorEnvironment",
    "GeneratorError",
    "HookError",
    "HooksConfig",
    "JetConfig",
    "JetConfigError",
    "JetError",
    "PlatformPrepareError",
    "RestoreType",
    "detect_restore_type",
    "restore_app",
]
