"""Tooling task dispatch for existing projects."""
