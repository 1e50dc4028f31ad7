"""Unit tests for staging path resolution."""

from __future__ import annotations

import json
from pathlib import Path

from core.configured_paths import resolve_configured_paths


def test_resolve_configured_paths_uses_defaults_without_config(tmp_path: Path) -> None:
    """Missing config should yield the default staging directories."""
    paths = resolve_configured_paths(tmp_path)

    assert paths.staging_hybrid == tmp_path / "hybrid" and paths.staging_web == tmp_path / "web"


def test_resolve_configured_paths_reads_staging_overrides(tmp_path: Path) -> None:
    """Staging overrides in the app config should be honored."""
    (tmp_path / "oraclejetconfig.json").write_text(
        json.dumps({"paths": {"staging": {"hybrid": "cordova-app"}}}),
        encoding="utf-8",
    )

    paths = resolve_configured_paths(tmp_path)

    assert paths.staging_hybrid == tmp_path / "cordova-app" and (
        paths.staging_web == tmp_path / "web"
    )


def test_resolve_configured_paths_tolerates_bare_version_config(tmp_path: Path) -> None:
    """A config file holding only a version string should fall back to defaults."""
    (tmp_path / "oraclejetconfig.json").write_text('"0.1.0"', encoding="utf-8")

    paths = resolve_configured_paths(tmp_path)

    assert paths.staging_hybrid == tmp_path / "hybrid"
