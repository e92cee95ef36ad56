"""
Structured logging configuration using structlog.
Human-readable output in development, JSON everywhere else. Account
numbers are masked before any renderer sees them.
"""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog.types import Processor

from girocode.core.config import get_settings

# Event keys whose values are account identifiers
SENSITIVE_KEYS = frozenset({"iban"})


def mask_account_number(value: str, visible: int = 4) -> str:
    """Mask all but the country code and the last *visible* characters."""
    compact = "".join(value.split())
    if len(compact) <= visible + 2:
        return "*" * len(compact)
    return compact[:2] + "*" * (len(compact) - visible - 2) + compact[-visible:]


def redact_account_numbers(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor that masks IBANs in log events."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        value = event_dict[key]
        if isinstance(value, str):
            event_dict[key] = mask_account_number(value)
    return event_dict


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """
    Configure structured logging.

    Args:
        level: Log level name; defaults to the ``LOG_LEVEL`` setting
        json_logs: Force JSON output on or off; by default JSON is used
            outside the development environment
    """
    settings = get_settings()
    if json_logs is None:
        json_logs = settings.environment != "development"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        redact_account_numbers,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, (level or settings.log_level).upper()),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance with the given name."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
