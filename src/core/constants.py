"""Core constants used across jetkit modules.

This module centralizes file names, defaults, and identifiers.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

GENERATOR_VERSION = "0.1.0"
GENERATOR_NAMESPACE = "@oracle/oraclejet"
GENERATOR_ENTRY_POINT_GROUP = "jetkit.generators"
APP_GENERATOR_NAME = "app"
HYBRID_GENERATOR_NAME = "hybrid"
APP_CONFIG_JSON = "oraclejetconfig.json"
CORDOVA_CONFIG_XML = "config.xml"
PATH_TO_HOOKS_CONFIG = Path("scripts") / "hooks" / "hooks.json"
AFTER_APP_RESTORE_HOOK = "after_app_restore"
HOOK_ENTRY_POINT_NAME = "run"
DEFAULT_STAGING_HYBRID = "hybrid"
DEFAULT_STAGING_WEB = "web"
HYBRID_WWW_DIR_NAME = "www"
COMPONENT_SCOPE = "component"
DEFAULT_PACKAGE_MANAGER = "npm"
DEFAULT_PLATFORM_TOOL = "cordova"
DEFAULT_TOOLING_COMMAND = "ojet-tooling"
DEFAULT_PREPARE_MAX_BUFFER = 1024 * 20000
BENIGN_PREPARE_FAILURE_MARKER = "index.html"
JSON_INDENT = 2
