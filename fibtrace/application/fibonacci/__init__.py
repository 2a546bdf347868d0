from fibtrace.application.fibonacci.dtos import FibonacciReport
from fibtrace.application.fibonacci.run_loop import PROMPT, TRACER_NAME, FibonacciApp

__all__ = ["PROMPT", "TRACER_NAME", "FibonacciApp", "FibonacciReport"]
