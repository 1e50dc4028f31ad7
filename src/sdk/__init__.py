"""Python SDK entry points."""
