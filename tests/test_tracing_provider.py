"""
Tests for the OpenTelemetry wiring.

Verifies the resource, the exporter output format and the batching provider.
"""

import io
import json

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor

from fibtrace.core.config import Settings
from fibtrace.infrastructure.tracing.provider import (
    build_resource,
    build_span_exporter,
    build_tracer_provider,
)


def _export_one_span(out: io.StringIO, **kwargs) -> None:
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(build_span_exporter(out, **kwargs)))
    with provider.get_tracer("test").start_as_current_span("Sample") as span:
        span.set_attribute("request.n", "7")
    provider.shutdown()


class TestResource:
    """Tests for build_resource()."""

    def test_service_identity(self) -> None:
        attributes = build_resource(Settings(_env_file=None)).attributes
        assert attributes["service.name"] == "fib"
        assert attributes["service.version"] == "v0.1.0"
        assert attributes["environment"] == "demo"

    def test_merged_with_sdk_defaults(self) -> None:
        attributes = build_resource(Settings(_env_file=None)).attributes
        assert attributes["telemetry.sdk.language"] == "python"

    def test_configurable(self) -> None:
        config = Settings(_env_file=None, service_name="fib-test", environment="ci")
        attributes = build_resource(config).attributes
        assert attributes["service.name"] == "fib-test"
        assert attributes["environment"] == "ci"


class TestSpanExporter:
    """Tests for the console exporter formatting."""

    def test_pretty_output_without_timestamps(self) -> None:
        out = io.StringIO()
        _export_one_span(out)

        payload = json.loads(out.getvalue())
        assert payload["name"] == "Sample"
        assert payload["attributes"] == {"request.n": "7"}
        assert "start_time" not in payload
        assert "end_time" not in payload
        assert out.getvalue().count("\n") > 1

    def test_timestamps_kept_on_request(self) -> None:
        out = io.StringIO()
        _export_one_span(out, include_timestamps=True)

        payload = json.loads(out.getvalue())
        assert "start_time" in payload
        assert "end_time" in payload

    def test_compact_output_is_one_line(self) -> None:
        out = io.StringIO()
        _export_one_span(out, pretty=False)
        assert out.getvalue().count("\n") == 1


class TestTracerProvider:
    """Tests for build_tracer_provider()."""

    def test_shutdown_flushes_batched_spans(self) -> None:
        out = io.StringIO()
        provider = build_tracer_provider(Settings(_env_file=None), out)
        with provider.get_tracer("test").start_as_current_span("Batched"):
            pass
        provider.shutdown()

        text = out.getvalue()
        assert '"name": "Batched"' in text
        assert '"service.name": "fib"' in text
