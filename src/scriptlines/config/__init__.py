"""scriptlines configuration module.

Nothing here touches the disk on import. Settings are resolved the first
time ``get_settings()`` is called, and logging is configured only when a
caller (the CLI callback) hands settings to ``configure_logging``.
"""

from __future__ import annotations

from typing import Any

from scriptlines.config.logging import configure_logging
from scriptlines.config.logging import get_logger as _get_logger
from scriptlines.config.settings import (
    EditorConfiguration,
    ScriptLinesSettings,
    get_settings,
    get_settings_for_cli,
    set_settings,
)
from scriptlines.config.settings import (
    reset_settings as _reset_settings,
)

__all__ = [
    "EditorConfiguration",
    "ScriptLinesSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "get_settings_for_cli",
    "reset_settings",
    "set_settings",
]

_logger_cache: dict[str, Any] = {}


def get_logger(name: str) -> Any:
    """Get a structlog logger, cached by name.

    The logger is lazy: it picks up whatever ``configure_logging`` installed
    by the time it first emits an event.

    Args:
        name: Logger name (usually __name__).

    Returns:
        structlog logger proxy.
    """
    if name not in _logger_cache:
        _logger_cache[name] = _get_logger(name)
    return _logger_cache[name]


def reset_settings() -> None:
    """Reset settings and clear logger cache."""
    _reset_settings()
    _logger_cache.clear()
