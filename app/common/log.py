import logging
import logging.config
import os
import sys
from typing import Callable, List, Tuple

import orjson
import structlog

_SEVERITIES = {
    "debug": "DEBUG",
    "info": "INFO",
    "warning": "WARNING",
    "warn": "WARNING",
    "error": "ERROR",
    "exception": "ERROR",
    "critical": "CRITICAL",
}


def json_renderer(logger, name: str, event_dict: dict):
    return orjson.dumps(event_dict, default=str).decode()


def resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def use_colors() -> bool:
    return sys.stdout.isatty() and "NO_COLOR" not in os.environ


def add_severity(logger, method_name: str, event_dict: dict):
    # Cloud log collectors key off `severity`, not `level`.
    event_dict["severity"] = _SEVERITIES.get(method_name, method_name.upper())
    return event_dict


def configure(
    service: str,
    version: str,
    json: bool,
    level: str,
):
    """Set up structlog with formatting and context providers for your app."""
    shared, structured, renderer = _get_processors(service, version, json)
    formatting = {
        "()": structlog.stdlib.ProcessorFormatter,
        "processors": [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        "foreign_pre_chain": shared,
    }
    level = resolve_level(level)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": formatting},
            "handlers": {
                "default": {
                    "level": level,
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                }
            },
            "loggers": {
                "": {
                    "handlers": ["default"],
                    "level": level,
                    "propagate": True,
                },
                # aiohttp's own access log duplicates what the views report.
                "aiohttp.access": {"level": logging.WARNING},
            },
        }
    )
    structlog.configure(
        processors=shared + structured,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _get_processors(
    service: str, version: str, json: bool
) -> Tuple[List, List, Callable]:
    def add_app_name(logger, method_name, event_dict):
        event_dict.update(app=service, version=version)
        return event_dict

    shared = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_name,
    ]
    structured = [structlog.stdlib.PositionalArgumentsFormatter()]

    if json:
        # `json=True` means we're shipping logs somewhere that parses them.
        shared.extend((structlog.processors.format_exc_info, add_severity))
        renderer = json_renderer
    else:
        # Otherwise, we're probably testing or running in a dev environment.
        # Make it easy on the eyes.
        renderer = structlog.dev.ConsoleRenderer(colors=use_colors())
    # Add the formatter wrapper as the last callee in the processors for structlog.
    structured.append(structlog.stdlib.ProcessorFormatter.wrap_for_formatter)
    return shared, structured, renderer
