"""
OpenTelemetry wiring.

Builds the single TracerProvider for the process: a resource describing
the service, a console exporter writing human-readable JSON to a file,
and a batching span processor. The provider is injected into the
application rather than installed globally.
"""

import functools
import json
import os
from typing import TextIO

from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import ReadableSpan, TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from fibtrace.core.config import Settings

_TIMESTAMP_KEYS = ("start_time", "end_time")


def build_resource(config: Settings) -> Resource:
    """Return the SDK default resource merged with the service identity."""
    return Resource.create(
        {
            SERVICE_NAME: config.service_name,
            SERVICE_VERSION: config.service_version,
            "environment": config.environment,
        }
    )


def _format_span(span: ReadableSpan, pretty: bool, include_timestamps: bool) -> str:
    payload = json.loads(span.to_json(indent=None))
    if not include_timestamps:
        for key in _TIMESTAMP_KEYS:
            payload.pop(key, None)
        for event in payload.get("events") or []:
            event.pop("timestamp", None)
    return json.dumps(payload, indent=4 if pretty else None) + os.linesep


def build_span_exporter(
    out: TextIO, pretty: bool = True, include_timestamps: bool = False
) -> ConsoleSpanExporter:
    """Return a console exporter writing to the given stream.

    Args:
        out: Destination text stream (a trace file or stdout).
        pretty: Indent the JSON output.
        include_timestamps: Keep start/end times and event timestamps.
    """
    return ConsoleSpanExporter(
        out=out,
        formatter=functools.partial(
            _format_span, pretty=pretty, include_timestamps=include_timestamps
        ),
    )


def build_tracer_provider(config: Settings, out: TextIO) -> TracerProvider:
    """Create the process-wide tracer provider.

    The caller owns the provider and must call shutdown() to flush
    batched spans before closing ``out``.
    """
    provider = TracerProvider(resource=build_resource(config))
    exporter = build_span_exporter(
        out,
        pretty=config.pretty_print,
        include_timestamps=config.include_timestamps,
    )
    provider.add_span_processor(BatchSpanProcessor(exporter))
    return provider
