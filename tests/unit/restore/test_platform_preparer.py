"""Unit tests for the hybrid platform prepare step."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from core.config import JetConfig
from core.errors import ExecutionError, PlatformPrepareError
from core.process import CapturedOutput
from restore import platform_preparer
from restore.platform_preparer import is_benign_prepare_failure, prepare_platform


def _config(project_root: Path) -> JetConfig:
    return JetConfig(
        project_root=project_root,
        package_manager="npm",
        platform_tool="cordova",
        tooling_command="ojet-tooling",
        prepare_max_buffer=2048,
    )


def _failing_exec(output: str):
    def _fake_exec(argv: Sequence[str], cwd: Path, max_buffer: int) -> CapturedOutput:
        raise ExecutionError(
            f"Command failed: {' '.join(argv)}",
            command=argv,
            exit_code=1,
            output=output,
        )

    return _fake_exec


def test_prepare_platform_runs_prepare_in_hybrid_dir(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """Prepare should run in the hybrid staging dir after creating www."""
    captured: dict[str, object] = {}

    def _fake_exec(argv: Sequence[str], cwd: Path, max_buffer: int) -> CapturedOutput:
        captured["argv"] = list(argv)
        captured["cwd"] = cwd
        captured["max_buffer"] = max_buffer
        captured["www_exists"] = (cwd / "www").is_dir()
        return CapturedOutput(stdout="", stderr="")

    monkeypatch.setattr(platform_preparer, "exec_command", _fake_exec)
    prepare_platform(_config(tmp_path))

    assert captured == {
        "argv": ["cordova", "prepare"],
        "cwd": tmp_path / "hybrid",
        "max_buffer": 2048,
        "www_exists": True,
    }


def test_prepare_platform_tolerates_missing_index_html(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """A failure mentioning index.html should be treated as success."""
    monkeypatch.setattr(
        platform_preparer,
        "exec_command",
        _failing_exec("Error: ENOENT: no such file www/index.html"),
    )

    prepare_platform(_config(tmp_path))

    assert (tmp_path / "hybrid" / "www").is_dir()


def test_prepare_platform_raises_for_other_failures(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """Any other prepare failure should raise PlatformPrepareError."""
    monkeypatch.setattr(
        platform_preparer,
        "exec_command",
        _failing_exec("Error: Current working directory is not a Cordova-based project."),
    )

    with pytest.raises(PlatformPrepareError) as error_info:
        prepare_platform(_config(tmp_path))

    assert "Cordova-based project" in str(error_info.value)


def test_is_benign_prepare_failure_matches_only_index_html() -> None:
    """The benign predicate should key on the index.html marker."""
    assert is_benign_prepare_failure("missing www/index.html") and not (
        is_benign_prepare_failure("platform android not installed")
    )
