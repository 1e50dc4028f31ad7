"""Unit tests for child process helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from core.errors import ExecutionError
from core.process import exec_command, spawn_command


def test_spawn_command_succeeds_on_zero_exit(tmp_path: Path) -> None:
    """A zero exit code should complete without error."""
    spawn_command([sys.executable, "-c", "pass"], cwd=tmp_path)

    assert True


def test_spawn_command_raises_with_exit_code(tmp_path: Path) -> None:
    """A non-zero exit code should raise ExecutionError carrying the code."""
    with pytest.raises(ExecutionError) as error_info:
        spawn_command([sys.executable, "-c", "import sys; sys.exit(3)"], cwd=tmp_path)

    assert error_info.value.exit_code == 3


def test_spawn_command_raises_for_missing_executable(tmp_path: Path) -> None:
    """A missing executable should raise ExecutionError without an exit code."""
    with pytest.raises(ExecutionError) as error_info:
        spawn_command(["jetkit-no-such-executable"], cwd=tmp_path)

    assert error_info.value.exit_code is None


def test_exec_command_runs_in_working_directory(tmp_path: Path) -> None:
    """Captured runs should use the requested working directory."""
    output = exec_command(
        [sys.executable, "-c", "import os; print(os.getcwd())"],
        cwd=tmp_path,
        max_buffer=4096,
    )

    assert Path(output.stdout.strip()).resolve() == tmp_path.resolve()


def test_exec_command_error_carries_captured_output(tmp_path: Path) -> None:
    """Failure text should include what the child wrote to stderr."""
    script = "import sys; sys.stderr.write('missing www/index.html'); sys.exit(1)"

    with pytest.raises(ExecutionError) as error_info:
        exec_command([sys.executable, "-c", script], cwd=tmp_path, max_buffer=4096)

    assert "index.html" in str(error_info.value) and error_info.value.exit_code == 1


def test_exec_command_rejects_output_over_buffer(tmp_path: Path) -> None:
    """Output larger than the buffer cap should fail the run."""
    with pytest.raises(ExecutionError) as error_info:
        exec_command([sys.executable, "-c", "print('x' * 100)"], cwd=tmp_path, max_buffer=10)

    assert "exceeded" in str(error_info.value)
