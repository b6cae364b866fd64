"""
Structured logging utilities using structlog.

Faults inside the spell-check client never reach the host; these logs are the
only trace they leave, so every module logs through ``create_logger``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor


def add_service_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Add service context to all logs.

    Fields added:
    - service.name: Logical service name (from SERVICE_NAME env var)
    - deployment.environment: Environment (from ENVIRONMENT env var)
    """
    event_dict["service.name"] = os.getenv("SERVICE_NAME", "unknown")
    event_dict["deployment.environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def configure_logging(
    service_name: str = "spellcheck_bridge",
    environment: str | None = None,
    log_level: str = "INFO",
    log_format: str | None = None,
) -> None:
    """
    Configure stdlib logging and structlog for the bridge.

    Args:
        service_name: Name reported in the service context
        environment: Environment name (defaults to ENVIRONMENT env var)
        log_level: Logging level name
        log_format: "json" or "console"; defaults to LOG_FORMAT env var, then
            JSON in production and console elsewhere
    """
    if environment is None:
        environment = os.getenv("ENVIRONMENT", "development")

    os.environ.setdefault("SERVICE_NAME", service_name)
    os.environ.setdefault("ENVIRONMENT", environment)

    if log_format is None:
        log_format = os.getenv("LOG_FORMAT", "")
    log_format = log_format.lower()
    use_json = log_format == "json" or (not log_format and environment == "production")

    processors: list[Processor] = [
        merge_contextvars,
        add_service_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if use_json:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_logger(name: str | None = None) -> Any:
    """
    Create a logger with optional name binding.

    Args:
        name: Optional logger name (e.g., "client", "provider_bridge")

    Returns:
        A lazy structlog logger; configuration is resolved on first use, so
        module-level loggers pick up a later configure_logging call
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
