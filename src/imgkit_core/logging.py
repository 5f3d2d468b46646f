"""structlog wiring for imgkit-core.

Every module logs through :func:`get_logger`, which binds a ``component`` field
(``config``, ...). Nothing is emitted anywhere in particular until the host calls
:func:`configure_logging`, usually with the ``logging`` section of its config::

    config = load_config()
    set_config(config)
    configure_logging(config.logging)
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Dict, TextIO

import structlog

if TYPE_CHECKING:  # pragma: no cover
    from .config import LoggingConfig

PACKAGE_LOGGER = "imgkit_core"

_LEVELS: Dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def get_logger(component: str) -> structlog.typing.FilteringBoundLogger:
    """Return a logger for ``imgkit_core.<component>`` with ``component`` bound."""
    return structlog.get_logger(f"{PACKAGE_LOGGER}.{component}", component=component)


def configure_logging(settings: LoggingConfig | str | None = None, *, stream: TextIO | None = None) -> None:
    """Route imgkit-core log events to ``stream`` (stdout by default).

    ``settings`` is a :class:`~imgkit_core.config.LoggingConfig` or a bare level
    name. JSON output carries ``level``, ``ts``, ``msg`` and ``component``; the
    console format is meant for people reading a terminal. Only the
    ``imgkit_core`` stdlib logger gets a handler, so the host's root logging
    setup is left alone.
    """

    if settings is None or isinstance(settings, str):
        level, output = settings or "info", "json"
    else:
        level, output = settings.level, settings.format
    numeric_level = _LEVELS.get(level.lower(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False

    processors: list = [
        structlog.processors.TimeStamper(fmt="iso", key="ts"),
        structlog.stdlib.add_log_level,
        _default_component,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if output == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors += [_rename_event_to_msg, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        # module-level loggers exist before the host configures anything
        cache_logger_on_first_use=False,
    )


def _default_component(
    logger: logging.Logger, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if "component" not in event_dict:
        name = getattr(logger, "name", None) or PACKAGE_LOGGER
        event_dict["component"] = name.removeprefix(f"{PACKAGE_LOGGER}.")
    return event_dict


def _rename_event_to_msg(
    _logger: logging.Logger, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


__all__ = ["PACKAGE_LOGGER", "configure_logging", "get_logger"]
