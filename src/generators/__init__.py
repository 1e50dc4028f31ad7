"""Generator lookup and dispatch."""

from __future__ import annotations

from generators.dispatch import create_app, delegate_to_generator, run_generator
from generators.environment import GeneratorEnvironment

__all__ = ["GeneratorEnvironment", "create_app", "delegate_to_generator", "run_generator"]
