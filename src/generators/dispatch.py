"""Generator dispatch for app creation and delegated generators."""

from __future__ import annotations

from typing import Mapping

from core.constants import APP_GENERATOR_NAME, GENERATOR_NAMESPACE, HYBRID_GENERATOR_NAME
from generators.environment import GeneratorEnvironment


def create_app(
    environment: GeneratorEnvironment,
    parameter: str | None = None,
    options: Mapping[str, object] | None = None,
) -> None:
    """Create a web or hybrid app.

    A ``hybrid`` option selects the hybrid generator; otherwise any ``web``
    option is dropped and the app generator runs. Neither flag is forwarded.

    Args:
        environment: Generator environment.
        parameter: Optional app name.
        options: Generator options.
    """
    environment.lookup()
    generator_options = dict(options or {})
    if "hybrid" in generator_options:
        del generator_options["hybrid"]
        run_generator(environment, HYBRID_GENERATOR_NAME, parameter, generator_options)
        return
    generator_options.pop("web", None)
    run_generator(environment, APP_GENERATOR_NAME, parameter, generator_options)


def delegate_to_generator(
    environment: GeneratorEnvironment,
    generator: str,
    parameter: str | None = None,
    options: Mapping[str, object] | None = None,
) -> None:
    """Look up generators and run one by name."""
    environment.lookup()
    run_generator(environment, generator, parameter, options)


def run_generator(
    environment: GeneratorEnvironment,
    generator: str,
    parameter: str | None = None,
    options: Mapping[str, object] | None = None,
) -> None:
    """Run ``<namespace>:<generator> [parameter]`` in the environment."""
    identifier = f"{GENERATOR_NAMESPACE}:{generator}"
    command = f"{identifier} {parameter}" if parameter else identifier
    environment.run(command, dict(options or {}))
