"""Lifecycle hook loading and invocation.

Projects register hook scripts in ``scripts/hooks/hooks.json``. A hook
script is a Python file exposing a zero-argument ``run()`` callable that
may return an awaitable.
"""

from __future__ import annotations

import asyncio
import importlib.util
import inspect
from pathlib import Path
from typing import Any, Callable, Mapping, cast

from core.config import JetConfig
from core.constants import AFTER_APP_RESTORE_HOOK, HOOK_ENTRY_POINT_NAME
from core.errors import HookError
from core.json_io import read_json_object
from core.logging_config import get_logger
from core.types import HooksConfig

_LOGGER = get_logger(__name__)

RestoreHook = Callable[[], object]


def read_hooks_config(hooks_config_path: Path) -> HooksConfig:
    """Read hook name to path mappings, empty when the file is absent."""
    if not hooks_config_path.exists():
        return HooksConfig(hooks={})
    hooks = read_json_object(hooks_config_path).get("hooks")
    if not isinstance(hooks, Mapping):
        return HooksConfig(hooks={})
    return HooksConfig(hooks=dict(hooks))


def load_restore_hook(hook_path: Path) -> RestoreHook:
    """Load a hook script and validate its ``run`` callable.

    Args:
        hook_path: Resolved hook script path.

    Returns:
        Zero-argument hook callable.

    Raises:
        HookError: If the file is missing, cannot be imported, or does not
            expose a conforming ``run()``.
    """
    if not hook_path.exists():
        raise HookError(f"Hook file not found at {hook_path}. Fix the path in hooks.json.")
    module = _load_python_module(hook_path)
    hook_fn = getattr(module, HOOK_ENTRY_POINT_NAME, None)
    if hook_fn is None or not callable(hook_fn):
        raise HookError(
            f"Invalid hook file at {hook_path}: missing callable {HOOK_ENTRY_POINT_NAME}()."
        )
    if not _accepts_no_arguments(hook_fn):
        raise HookError(
            f"Invalid hook file at {hook_path}: {HOOK_ENTRY_POINT_NAME}() must take no arguments."
        )
    return cast(RestoreHook, hook_fn)


def run_after_app_restore_hook(config: JetConfig) -> None:
    """Run the configured ``after_app_restore`` hook when present.

    Exceptions raised by the hook propagate unchanged.
    """
    hooks_config = read_hooks_config(config.hooks_config_path)
    configured_path = hooks_config.hook_path(AFTER_APP_RESTORE_HOOK)
    if configured_path is None:
        _LOGGER.warning("hook_not_defined", hook=AFTER_APP_RESTORE_HOOK)
        return
    hook_path = (config.project_root / configured_path).resolve()
    if not hook_path.exists():
        _LOGGER.warning(
            "hook_not_defined",
            hook=AFTER_APP_RESTORE_HOOK,
            configured_path=configured_path,
        )
        return
    hook_fn = load_restore_hook(hook_path)
    _LOGGER.info("hook_started", hook=AFTER_APP_RESTORE_HOOK, path=str(hook_path))
    result = hook_fn()
    if inspect.isawaitable(result):
        _complete_awaitable(result, hook_path)


def _complete_awaitable(result: Any, hook_path: Path) -> None:
    if _has_running_loop():
        if inspect.iscoroutine(result):
            result.close()
        raise HookError(
            f"Hook at {hook_path} returned an awaitable while an event loop is running. "
            "Call restore from synchronous code or make run() synchronous."
        )
    asyncio.run(_await_result(result))


def _has_running_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


async def _await_result(awaitable: Any) -> object:
    return await awaitable


def _accepts_no_arguments(hook_fn: Callable[..., object]) -> bool:
    try:
        signature = inspect.signature(hook_fn)
    except (TypeError, ValueError):
        return True
    for parameter in signature.parameters.values():
        if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
            continue
        if parameter.default is parameter.empty:
            return False
    return True


def _load_python_module(module_path: Path) -> Any:
    spec = importlib.util.spec_from_file_location("jetkit_user_restore_hook", str(module_path))
    if spec is None or spec.loader is None:
        raise HookError(
            f"Failed to load hook module at {module_path}. Verify file path and syntax."
        )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
