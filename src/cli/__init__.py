"""Command-line interface for jetkit."""
