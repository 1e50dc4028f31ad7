"""Unit tests for tooling dispatch."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

import pytest
from structlog.testing import capture_logs

from core.config import JetConfig
from tooling import dispatcher
from tooling.dispatcher import CommandToolingBackend, build_option_flags, run_tooling


class _RecordingTooling:
    def __init__(self) -> None:
        self.runs: list[tuple[str, str | None, str | None, dict[str, object]]] = []

    def add(self, scope: str, names: Sequence[str]) -> None:
        return None

    def run(
        self,
        task: str,
        scope: str | None,
        parameter: str | None,
        options: Mapping[str, object],
    ) -> None:
        self.runs.append((task, scope, parameter, dict(options)))


def _config(project_root: Path) -> JetConfig:
    return JetConfig(
        project_root=project_root,
        package_manager="npm",
        platform_tool="cordova",
        tooling_command="ojet-tooling",
        prepare_max_buffer=1024,
    )


def _make_project(project_root: Path) -> None:
    (project_root / "oraclejetconfig.json").write_text("{}", encoding="utf-8")


def test_run_tooling_forwards_inside_project(tmp_path: Path) -> None:
    """A valid project root should forward the task to the backend."""
    _make_project(tmp_path)
    tooling = _RecordingTooling()

    completed = run_tooling(tooling, tmp_path, "serve", "app", "android", {"release": True})

    assert completed and tooling.runs == [("serve", "app", "android", {"release": True})]


def test_run_tooling_refuses_outside_project(tmp_path: Path) -> None:
    """A directory without app config should not dispatch."""
    tooling = _RecordingTooling()

    completed = run_tooling(tooling, tmp_path, "build", "app", None)

    assert not completed and tooling.runs == []


def test_run_tooling_rejects_platform_option(tmp_path: Path) -> None:
    """A platform option should be refused in favor of a positional platform."""
    _make_project(tmp_path)
    tooling = _RecordingTooling()

    with capture_logs() as logs:
        completed = run_tooling(tooling, tmp_path, "build", "app", None, {"platform": "ios"})

    errors = [entry["event"] for entry in logs if entry["log_level"] == "error"]
    assert not completed and tooling.runs == [] and errors == ["platform_flag_unsupported"]


def test_build_option_flags_renders_booleans_and_values() -> None:
    """True becomes a bare flag, False and None are dropped."""
    flags = build_option_flags({"release": True, "theme": "alta", "sass": False, "x": None})

    assert flags == ["--release", "--theme=alta"]


def test_command_backend_builds_argv(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """The command backend should shell out with task, scope, parameter, flags."""
    captured: list[tuple[list[str], Path]] = []
    monkeypatch.setattr(
        dispatcher,
        "spawn_command",
        lambda argv, cwd: captured.append((list(argv), cwd)),
    )
    backend = CommandToolingBackend(_config(tmp_path))

    backend.run("build", "app", "android", {"release": True})
    backend.add("component", ["oj-button@^9.0.0"])

    assert captured == [
        (["ojet-tooling", "build", "app", "android", "--release"], tmp_path),
        (["ojet-tooling", "add", "component", "oj-button@^9.0.0"], tmp_path),
    ]
