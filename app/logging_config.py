"""Logging configuration for the application."""

import logging
import sys

import structlog


def configure_logging(debug_mode: bool = False):
    """Route stdlib logging to stdout and render structlog events on the console.

    Args:
        debug_mode: Also emit the per-request debug events if True
    """
    log_level = logging.DEBUG if debug_mode else logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
