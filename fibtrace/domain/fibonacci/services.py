"""
Fibonacci domain service.

Pure function over unsigned 64-bit arithmetic. No I/O, no state.
"""

from fibtrace.domain.fibonacci.errors import FibonacciOverflowError, InvalidIndexError

UINT64_MAX = 2**64 - 1

# F(93) = 12200160415121876738 is the last value below 2**64.
MAX_FIBONACCI_INDEX = 93


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with F(0) = 0 and F(1) = 1.

    Args:
        n: Non-negative index.

    Returns:
        F(n), guaranteed to fit in an unsigned 64-bit integer.

    Raises:
        InvalidIndexError: If n is negative.
        FibonacciOverflowError: If F(n) exceeds UINT64_MAX.
    """
    if n < 0:
        raise InvalidIndexError(n)
    if n <= 1:
        return n
    if n > MAX_FIBONACCI_INDEX:
        raise FibonacciOverflowError(n)

    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current
