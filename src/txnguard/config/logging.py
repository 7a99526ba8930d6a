"""Log routing for the ``txnguard`` logger tree.

Modules log through ``logging.getLogger(__name__)``.  Records under the
``txnguard`` logger go to one stderr handler whose structlog formatter
renders them as console text or as JSON lines; other loggers and the root
logger are left untouched.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "txnguard"


def _formatter(json_lines: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if json_lines:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(*, verbose: bool = False, json_lines: bool = False) -> logging.Logger:
    """Route ``txnguard`` records to stderr, replacing any earlier handler.

    DEBUG and up when *verbose*, else WARNING and up.  Returns the
    configured logger.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(json_lines))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
