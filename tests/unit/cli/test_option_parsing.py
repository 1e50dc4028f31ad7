"""Unit tests for CLI option parsing."""

from __future__ import annotations

import pytest

from cli.option_parsing import parse_options
from core.errors import JetConfigError


def test_parse_options_handles_values_and_bare_keys() -> None:
    """KEY=VALUE pairs keep their value; bare keys become True."""
    options = parse_options(["template=navbar", "typescript", "empty="])

    assert options == {"template": "navbar", "typescript": True, "empty": ""}


def test_parse_options_rejects_empty_key() -> None:
    """An option without a key should raise a config error."""
    with pytest.raises(JetConfigError):
        parse_options(["=value"])

    assert True
