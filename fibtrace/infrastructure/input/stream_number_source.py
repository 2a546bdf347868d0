"""
Adapter: line-oriented number reader.

Implements NumberSource over any text stream (stdin in production,
io.StringIO in tests). One unsigned decimal value per line.
"""

import logging
import re
from typing import TextIO

from fibtrace.domain.fibonacci.errors import InputFailureError
from fibtrace.domain.fibonacci.ports import NumberSource
from fibtrace.domain.fibonacci.services import UINT64_MAX

logger = logging.getLogger(__name__)

_UNSIGNED_DECIMAL = re.compile(r"[0-9]+")


class StreamNumberSource(NumberSource):
    """Reads one non-negative integer per line from a text stream.

    The read blocks until a full line (or end of stream) is available.
    No timeout is applied.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def read_number(self) -> int:
        """Read and parse the next line.

        Returns:
            The parsed value.

        Raises:
            InputFailureError: On EOF, a blank line, malformed text,
                or a value outside the unsigned 64-bit range.
        """
        line = self._stream.readline()
        if line == "":
            raise InputFailureError("EOF")

        token = line.strip()
        if not token:
            raise InputFailureError("unexpected newline", raw=line)
        if not _UNSIGNED_DECIMAL.fullmatch(token):
            raise InputFailureError(f"expected integer, got {token!r}", raw=line)

        value = int(token)
        if value > UINT64_MAX:
            raise InputFailureError(f"value out of range: {token}", raw=line)

        logger.debug("Read n=%d", value)
        return value
