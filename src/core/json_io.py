"""JSON file helpers shared by config readers and writers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from core.constants import JSON_INDENT
from core.errors import JetConfigError


def read_json_file(path: Path) -> Any:
    """Read and parse a JSON file.

    Args:
        path: File to read.

    Returns:
        Parsed JSON payload of any shape.

    Raises:
        JetConfigError: If the file is not valid JSON.
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise JetConfigError(
            f"Failed to parse JSON at {path}: {error}. Fix the file syntax and retry."
        ) from error


def read_json_object(path: Path) -> dict[str, Any]:
    """Read a JSON file, returning an empty mapping for non-object payloads."""
    payload = read_json_file(path)
    if isinstance(payload, Mapping):
        return dict(payload)
    return {}


def write_json_file(path: Path, payload: object) -> None:
    """Serialize payload as indented JSON, replacing the file contents."""
    path.write_text(json.dumps(payload, indent=JSON_INDENT), encoding="utf-8")
