"""Shared configuration, errors, logging, and process helpers."""
