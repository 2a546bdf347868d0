"""
Port interfaces (ABCs) for the Fibonacci bounded context.

Ports define the contracts that the application requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod


class NumberSource(ABC):
    """Port for acquiring the next requested Fibonacci index."""

    @abstractmethod
    def read_number(self) -> int:
        """Block until the next non-negative integer is available.

        Returns:
            The parsed value, in the unsigned 64-bit range.

        Raises:
            InputFailureError: On end of input or malformed input.
        """
        raise NotImplementedError
