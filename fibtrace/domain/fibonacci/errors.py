"""
Domain-specific errors for the Fibonacci bounded context.

All errors raised from the domain layer must be defined here.
They are mapped to console output and exit codes by the lifecycle.
No framework imports allowed.
"""


class FibonacciDomainError(Exception):
    """Base error for all Fibonacci domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class FibonacciOverflowError(FibonacciDomainError):
    """Raised when F(n) does not fit in an unsigned 64-bit integer."""

    def __init__(self, n: int) -> None:
        super().__init__(f"unsupported fibonacci number {n}: too large")
        self.n = n


class InvalidIndexError(FibonacciDomainError):
    """Raised when a negative index is passed to the Fibonacci routine."""

    def __init__(self, n: int) -> None:
        super().__init__(f"invalid fibonacci index {n}: must be non-negative")
        self.n = n


class InputFailureError(FibonacciDomainError):
    """Raised when no valid number could be read from the input source.

    Covers end of stream as well as malformed input. Fatal to the run loop.
    """

    def __init__(self, reason: str, raw: str | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.raw = raw
