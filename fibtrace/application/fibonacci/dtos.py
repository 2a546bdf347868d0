"""
Data Transfer Objects for the Fibonacci application layer.

They are plain dataclasses with no behavior beyond rendering.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FibonacciReport:
    """Outcome of a single compute-and-report step.

    Attributes:
        n: The requested index.
        value: F(n), or None when the computation failed.
        error: Failure reason, or None on success.
    """

    n: int
    value: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        """Return the console line for this report."""
        if self.error is not None:
            return f"fibonacci({self.n}) = {self.error}"
        return f"fibonacci({self.n}) = {self.value}"
