"""Generator registry and runtime.

This module replaces a process-wide generator registry with an explicit
environment object. Each environment discovers generators from installed
entry points and reports run failures through an error callback supplied
at construction.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import Callable, Mapping, Sequence

from core.constants import GENERATOR_ENTRY_POINT_GROUP
from core.errors import GeneratorError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

GeneratorFn = Callable[[Sequence[str], Mapping[str, object]], object]
ErrorHandler = Callable[[Exception], None]


class GeneratorEnvironment:
    """Lookup-and-run registry for named generators."""

    def __init__(
        self,
        on_error: ErrorHandler,
        entry_point_group: str = GENERATOR_ENTRY_POINT_GROUP,
    ) -> None:
        """Create an environment.

        Args:
            on_error: Callback receiving every generator failure.
            entry_point_group: Entry-point group scanned by lookup.
        """
        self._on_error = on_error
        self._entry_point_group = entry_point_group
        self._generators: dict[str, GeneratorFn] = {}

    @property
    def namespaces(self) -> tuple[str, ...]:
        """Registered generator identifiers in sorted order."""
        return tuple(sorted(self._generators))

    def register(self, identifier: str, generator: GeneratorFn) -> None:
        """Register a generator under a ``namespace:name`` identifier."""
        self._generators[identifier] = generator

    def lookup(self) -> None:
        """Discover generators from installed entry points.

        Entry points that fail to load are reported through the error
        callback and skipped.
        """
        for entry_point in entry_points(group=self._entry_point_group):
            try:
                generator = entry_point.load()
            except Exception as error:  # noqa: BLE001 - one broken plugin must not hide others
                self._on_error(
                    GeneratorError(f"Failed to load generator '{entry_point.name}': {error}")
                )
                continue
            self.register(entry_point.name, generator)
        _LOGGER.debug("generators_discovered", generators=list(self.namespaces))

    def run(self, command: str, options: Mapping[str, object] | None = None) -> None:
        """Run a generator command of the form ``namespace:name [args...]``.

        Unknown generators and generator exceptions go to the error
        callback instead of being raised.
        """
        identifier, *arguments = command.split(" ")
        generator = self._generators.get(identifier)
        if generator is None:
            self._on_error(
                GeneratorError(
                    f"Generator '{identifier}' not found. "
                    "Install the package that provides it and retry."
                )
            )
            return
        try:
            generator(arguments, dict(options or {}))
        except Exception as error:  # noqa: BLE001 - routed to the error channel
            self._on_error(error)
