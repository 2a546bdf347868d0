"""Helpers shared by the test modules."""

import io
import threading
import time
from typing import Callable


def console_lines(stream: io.StringIO) -> list[str]:
    return stream.getvalue().splitlines()


def wait_for(predicate: Callable[[], bool], timeout: float = 5.0) -> bool:
    """Poll predicate until it holds or the timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def start_daemon(target: Callable[[], None]) -> threading.Thread:
    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread
