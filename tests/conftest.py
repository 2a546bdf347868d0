"""Shared fixtures: in-memory span capture, console capture, scripted input."""

import io
import logging
import queue
from typing import Callable

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from fibtrace.domain.fibonacci.ports import NumberSource
from fibtrace.shared.logging import build_console_logger


class ScriptedNumberSource(NumberSource):
    """NumberSource fed from a queue. Blocks while the queue is empty.

    Queued exceptions are raised instead of returned.
    """

    def __init__(self) -> None:
        self._items: queue.Queue = queue.Queue()
        self.on_read: Callable[[], None] | None = None

    def feed(self, *items: object) -> None:
        for item in items:
            self._items.put(item)

    def read_number(self) -> int:
        if self.on_read is not None:
            self.on_read()
        item = self._items.get()
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter: InMemorySpanExporter) -> TracerProvider:
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    yield provider
    provider.shutdown()


@pytest.fixture
def console_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(request: pytest.FixtureRequest, console_stream: io.StringIO) -> logging.Logger:
    """Console logger unique to the test, writing into console_stream."""
    return build_console_logger(console_stream, name=f"fibtrace.test.{request.node.name}")


@pytest.fixture
def scripted_source() -> ScriptedNumberSource:
    return ScriptedNumberSource()
