"""Logging configuration.

Single entry point for structured logging (structlog on top of stdlib logging).
Logs always go to stderr: stdout belongs to the drills' own output.

Usage:
    from core.logging_config import configure_logging
    configure_logging(level="DEBUG", fmt=LogFormat.JSON)
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

from core.domain.operations import LogFormat

_configured = False


def configure_logging(
    level: str = "WARNING",
    fmt: LogFormat = LogFormat.CONSOLE,
    *,
    force: bool = False,
) -> None:
    """Configure structlog once per process.

    Subsequent calls are no-ops unless `force=True` (the CLI callback forces it
    so `--log-level` wins over whatever ran before).
    """

    global _configured

    if _configured and not force:
        return

    log_level = getattr(logging, level.upper(), logging.WARNING)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        structlog.processors.StackInfoRenderer(),
    ]

    if fmt == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )
    for logger_name in ("cli", "core", "adapters"):
        logging.getLogger(logger_name).setLevel(log_level)

    _configured = True
