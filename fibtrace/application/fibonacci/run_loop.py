"""
Use case: Interactive Fibonacci request loop.

Input: non-negative integers from a NumberSource, one per iteration.
Output: one prompt and one result line per iteration on the console logger.
Side effects: One span tree per iteration (Run -> Poll, Write -> Fibonacci).
Failure cases: InputFailureError ends the loop; overflow is only reported.
"""

import logging

from opentelemetry.trace import Status, StatusCode, TracerProvider

from fibtrace.application.fibonacci.dtos import FibonacciReport
from fibtrace.domain.fibonacci.errors import FibonacciOverflowError
from fibtrace.domain.fibonacci.ports import NumberSource
from fibtrace.domain.fibonacci.services import fibonacci

logger = logging.getLogger(__name__)

PROMPT = "What fibonacci no would you like to know?"

# Instrumentation library name for every span this package creates.
TRACER_NAME = "fibonacci-with-otel"


class FibonacciApp:
    """Reads indices, computes Fibonacci numbers and reports them.

    Every span is opened with ``start_as_current_span`` so it is ended on
    all exit paths, and an escaping exception is recorded on it.
    """

    def __init__(
        self,
        source: NumberSource,
        console: logging.Logger,
        tracer_provider: TracerProvider,
    ) -> None:
        self._source = source
        self._console = console
        self._tracer = tracer_provider.get_tracer(TRACER_NAME)

    def run(self) -> None:
        """Loop until the input source fails.

        Each iteration starts a new root span named "Run".

        Raises:
            InputFailureError: When no further number can be read.
        """
        while True:
            with self._tracer.start_as_current_span("Run"):
                n = self.poll()
                self.write(n)

    def poll(self) -> int:
        """Prompt for and read the next index.

        The parsed value is stored on the span as a decimal string,
        since span integer attributes are signed 64-bit.
        """
        with self._tracer.start_as_current_span("Poll") as span:
            self._console.info(PROMPT)
            n = self._source.read_number()
            span.set_attribute("request.n", str(n))
            return n

    def write(self, n: int) -> FibonacciReport:
        """Compute F(n) and log the result line. Never raises on overflow."""
        with self._tracer.start_as_current_span("Write"):
            report = self._compute(n)
            self._console.info(report.render())
            return report

    def _compute(self, n: int) -> FibonacciReport:
        with self._tracer.start_as_current_span("Fibonacci") as span:
            try:
                value = fibonacci(n)
            except FibonacciOverflowError as exc:
                logger.debug("Overflow for n=%d", n)
                span.record_exception(exc)
                span.set_status(Status(StatusCode.ERROR, exc.message))
                return FibonacciReport(n=n, error=exc.message)
            return FibonacciReport(n=n, value=value)
