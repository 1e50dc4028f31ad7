"""Hybrid platform prepare step.

This module runs the mobile toolchain's prepare command in the hybrid
staging directory. Fresh projects have no ``www/index.html`` yet, which
the toolchain reports as a failure; that one failure is tolerated.
"""

from __future__ import annotations

from core.config import JetConfig
from core.configured_paths import resolve_configured_paths
from core.constants import BENIGN_PREPARE_FAILURE_MARKER, HYBRID_WWW_DIR_NAME
from core.errors import ExecutionError, PlatformPrepareError
from core.logging_config import get_logger
from core.process import exec_command

_LOGGER = get_logger(__name__)


def is_benign_prepare_failure(failure_text: str) -> bool:
    """Return whether a prepare failure only concerns the missing scaffold file."""
    return BENIGN_PREPARE_FAILURE_MARKER in failure_text


def prepare_platform(config: JetConfig) -> None:
    """Ensure the hybrid ``www`` directory exists and run platform prepare.

    Args:
        config: Runtime configuration.

    Raises:
        PlatformPrepareError: If prepare fails for any reason other than a
            missing ``index.html``.
    """
    hybrid_dir = resolve_configured_paths(config.project_root).staging_hybrid
    (hybrid_dir / HYBRID_WWW_DIR_NAME).mkdir(parents=True, exist_ok=True)
    argv = [config.platform_tool, "prepare"]
    _LOGGER.info(
        "platform_prepare_started",
        platform_tool=config.platform_tool,
        cwd=str(hybrid_dir),
    )
    try:
        exec_command(argv, cwd=hybrid_dir, max_buffer=config.prepare_max_buffer)
    except ExecutionError as error:
        if not is_benign_prepare_failure(str(error)):
            raise PlatformPrepareError(
                error.args[0],
                command=error.command,
                exit_code=error.exit_code,
                output=error.output,
            ) from error
        _LOGGER.debug("platform_prepare_benign_failure", exit_code=error.exit_code)
