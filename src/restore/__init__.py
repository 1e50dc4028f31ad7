"""Restore pipeline steps for web and hybrid applications."""

from __future__ import annotations

from restore.pipeline import detect_restore_type, restore_app

__all__ = ["detect_restore_type", "restore_app"]
