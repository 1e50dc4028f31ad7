"""Jetkit exception hierarchy.

Child-process failures from install, prepare, and tooling carry the
command and its output. Prepare failures that survive the benign-marker
filter, malformed hook files, and unknown generators each get their own
subclass so the restore pipeline and CLI can report them by kind.
"""

from __future__ import annotations

from typing import Sequence


class JetError(Exception):
    """Base exception for all jetkit failures."""


class JetConfigError(JetError):
    """Raised for invalid runtime or project configuration."""


class ExecutionError(JetError):
    """Raised when a child process exits non-zero or cannot be started.

    Attributes:
        command: Argument vector that was executed.
        exit_code: Child exit code, or None when it never started.
        output: Captured stdout/stderr text, empty when streamed.
    """

    def __init__(
        self,
        message: str,
        command: Sequence[str],
        exit_code: int | None = None,
        output: str = "",
    ) -> None:
        super().__init__(message)
        self.command = tuple(command)
        self.exit_code = exit_code
        self.output = output

    def __str__(self) -> str:
        message = super().__str__()
        if not self.output:
            return message
        return f"{message}\n{self.output}"


class PlatformPrepareError(ExecutionError):
    """Raised when the platform prepare step fails for a non-benign reason."""


class HookError(JetError):
    """Raised when a lifecycle hook file is missing or does not conform."""


class GeneratorError(JetError):
    """Raised for unknown generators and generator run failures."""
