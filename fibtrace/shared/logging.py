"""
Logging configuration for the application.

Two channels are configured here:
- diagnostics, in the usual structured format, written to stderr;
- the console, which carries the prompt and result lines to stdout
  with no prefix so the output reads as a plain conversation.

Logging must not change program behavior.
"""

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_LOGGER_NAME = "fibtrace.console"


def configure_logging(level: str = "WARNING") -> None:
    """Configure diagnostic logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("opentelemetry").setLevel(logging.WARNING)


def build_console_logger(
    stream: TextIO | None = None, name: str = CONSOLE_LOGGER_NAME
) -> logging.Logger:
    """Return a logger that prints bare messages to the given stream.

    The logger does not propagate, so diagnostic handlers installed by
    configure_logging never duplicate console lines.

    Args:
        stream: Destination stream. Defaults to sys.stdout.
        name: Logger name. Tests pass a unique name to stay isolated.
    """
    console = logging.getLogger(name)
    console.setLevel(logging.INFO)
    console.propagate = False
    for handler in list(console.handlers):
        console.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    console.addHandler(handler)
    return console
