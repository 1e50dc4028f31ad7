"""Child process helpers.

This module runs external executables for restore steps and tooling.
Streaming runs inherit the terminal; captured runs collect output for
error filtering.
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from core.errors import ExecutionError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class CapturedOutput:
    """Output collected from a captured child process."""

    stdout: str
    stderr: str

    @property
    def combined(self) -> str:
        """Return stderr and stdout joined for error reporting."""
        return "\n".join(part for part in (self.stderr.rstrip(), self.stdout.rstrip()) if part)


def spawn_command(argv: Sequence[str], cwd: Path) -> None:
    """Run a command with output streamed to the current terminal.

    Args:
        argv: Command and arguments.
        cwd: Working directory.

    Raises:
        ExecutionError: If the command cannot start or exits non-zero.
    """
    resolved_argv = _resolve_argv(argv)
    _LOGGER.debug("process_spawned", command=list(argv), cwd=str(cwd))
    try:
        completed = subprocess.run(resolved_argv, cwd=str(cwd), check=False)
    except OSError as error:
        raise ExecutionError(
            f"Failed to start '{argv[0]}': {error}. Verify it is installed and on PATH.",
            command=argv,
        ) from error
    if completed.returncode != 0:
        raise ExecutionError(
            f"Command failed: {' '.join(argv)} (exit code {completed.returncode}).",
            command=argv,
            exit_code=completed.returncode,
        )


def exec_command(argv: Sequence[str], cwd: Path, max_buffer: int) -> CapturedOutput:
    """Run a command with stdin inherited and stdout/stderr captured.

    Args:
        argv: Command and arguments.
        cwd: Working directory.
        max_buffer: Size limit in bytes for each captured stream. It is
            checked once the child has exited, so it bounds the accepted
            output, not the memory used while capturing.

    Returns:
        Captured output of a successful run.

    Raises:
        ExecutionError: If the command cannot start, exits non-zero, or
            writes more than ``max_buffer`` bytes to one stream.
    """
    resolved_argv = _resolve_argv(argv)
    _LOGGER.debug("process_executed", command=list(argv), cwd=str(cwd))
    try:
        completed = subprocess.run(
            resolved_argv,
            cwd=str(cwd),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as error:
        raise ExecutionError(
            f"Failed to start '{argv[0]}': {error}. Verify it is installed and on PATH.",
            command=argv,
        ) from error
    output = CapturedOutput(stdout=completed.stdout or "", stderr=completed.stderr or "")
    if completed.returncode != 0:
        raise ExecutionError(
            f"Command failed: {' '.join(argv)}",
            command=argv,
            exit_code=completed.returncode,
            output=output.combined,
        )
    for stream_name, text in (("stdout", output.stdout), ("stderr", output.stderr)):
        if len(text.encode("utf-8")) > max_buffer:
            raise ExecutionError(
                f"Command output exceeded {max_buffer} bytes on {stream_name}: {' '.join(argv)}",
                command=argv,
                exit_code=completed.returncode,
            )
    return output


def _resolve_argv(argv: Sequence[str]) -> list[str]:
    # npm and cordova ship as .cmd shims on Windows
    executable = shutil.which(argv[0]) or argv[0]
    return [executable, *argv[1:]]
