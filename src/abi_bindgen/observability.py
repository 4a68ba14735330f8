"""Structured logging setup for abi-bindgen.

Modules log through ``structlog.get_logger(__name__)`` with snake_case
event names and keyword context. The CLI calls ``configure_logging`` once;
logs go to stderr so they never mix with generated output on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(
    verbose: bool = False,
    stream: TextIO | None = None,
    colors: bool = True,
) -> None:
    """Configure structlog for console output.

    Args:
        verbose: Emit DEBUG and INFO events. Otherwise only warnings and
            errors are shown.
        stream: Destination stream. Defaults to stderr.
        colors: Colorize the console renderer.

    Example:
        >>> configure_logging(verbose=True)
        >>> structlog.get_logger("abi_bindgen").info("binding_written", output="FooAbi.ts")
    """
    level = logging.DEBUG if verbose else logging.WARNING

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=colors),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )
