"""Logging setup — stdlib logging routed through structlog.

Library modules only call ``logging.getLogger(__name__)``; the process entry
point (the HTTP adapter) calls ``configure_logging`` once.
"""

from __future__ import annotations

import logging
import sys

import structlog

from healthshare.config import settings


def configure_logging(level: str | None = None) -> None:
    """Configure root logging and structlog with a console renderer."""
    level_name = (level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stdout,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
