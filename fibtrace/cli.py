"""
CLI entry point.

Usage:
    # Interactive session, spans written to traces.txt
    python -m fibtrace

    # Spans to stdout, compact, with timestamps
    python -m fibtrace --traces-file - --compact --timestamps

    # Piped input
    printf '10\n94\n' | python -m fibtrace
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import Sequence, TextIO

from fibtrace import __version__
from fibtrace.application.fibonacci.run_loop import FibonacciApp
from fibtrace.core.config import Settings, settings
from fibtrace.infrastructure.input.stream_number_source import StreamNumberSource
from fibtrace.infrastructure.tracing.provider import build_tracer_provider
from fibtrace.lifecycle import EXIT_FAILURE, ProcessLifecycle
from fibtrace.shared.logging import build_console_logger, configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fibtrace",
        description="Compute Fibonacci numbers read from stdin, tracing each step.",
    )
    parser.add_argument(
        "--traces-file",
        help="File receiving exported spans ('-' for stdout). "
        "Defaults to FIBTRACE_TRACES_PATH or traces.txt.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Diagnostic log level (written to stderr).",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Write one span per line instead of indented JSON.",
    )
    parser.add_argument(
        "--timestamps",
        action="store_true",
        help="Keep span start/end timestamps in the export.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    """Apply command-line overrides on top of environment settings."""
    overrides: dict[str, object] = {}
    if args.traces_file is not None:
        overrides["traces_path"] = args.traces_file
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.compact:
        overrides["pretty_print"] = False
    if args.timestamps:
        overrides["include_timestamps"] = True
    return base.model_copy(update=overrides)


def _open_traces(config: Settings) -> TextIO:
    if config.traces_to_stdout:
        return sys.stdout
    return open(config.traces_path, "w", encoding="utf-8")


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    base_settings: Settings | None = None,
) -> int:
    """Run the program and return its exit status."""
    args = build_parser().parse_args(argv)
    config = resolve_settings(args, base_settings or settings)
    configure_logging(config.log_level)
    console = build_console_logger(stdout or sys.stdout)

    try:
        traces = _open_traces(config)
    except OSError as exc:
        console.error(f"cannot open trace file {config.traces_path}: {exc}")
        return EXIT_FAILURE

    provider = build_tracer_provider(config, traces)
    try:
        app = FibonacciApp(StreamNumberSource(stdin or sys.stdin), console, provider)
        return asyncio.run(ProcessLifecycle(app, console).wait())
    finally:
        provider.shutdown()
        if traces is not sys.stdout:
            traces.close()
        logger.debug("Tracer provider shut down")


def main_entry() -> None:
    """Console-script entry point."""
    code = main()
    sys.stdout.flush()
    sys.stderr.flush()
    # The abandoned run-loop thread may still hold the stdin lock,
    # which would stall interpreter finalization.
    os._exit(code)
