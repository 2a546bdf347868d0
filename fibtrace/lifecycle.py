"""
Process lifecycle: runs the request loop in the background and decides
how the process ends.

Two outcomes race:
- an interrupt (SIGINT) -> farewell message, exit status 0;
- the loop returning or failing -> the error is logged, exit status 1.

The first one wins. The loser is abandoned: an in-flight read is not
cancelled, the worker is a daemon thread and dies with the process.
"""

import asyncio
import logging
import signal
import threading
from typing import Iterable

from fibtrace.application.fibonacci.run_loop import FibonacciApp
from fibtrace.domain.fibonacci.errors import FibonacciDomainError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
FAREWELL = "\ngoodbye"


def _resolve(future: asyncio.Future, exc: BaseException | None = None) -> None:
    if future.done():
        return
    if exc is not None:
        future.set_exception(exc)
    else:
        future.set_result(None)


class ProcessLifecycle:
    """Arbitrates between an interrupt and the run loop's outcome."""

    def __init__(
        self,
        app: FibonacciApp,
        console: logging.Logger,
        signals: Iterable[signal.Signals] = (signal.SIGINT,),
    ) -> None:
        self._app = app
        self._console = console
        self._signals = tuple(signals)
        self._loop: asyncio.AbstractEventLoop | None = None
        self._interrupted: asyncio.Future | None = None

    def interrupt(self) -> None:
        """Request shutdown. Safe to call from any thread or a signal handler."""
        loop, interrupted = self._loop, self._interrupted
        if loop is None or interrupted is None:
            raise RuntimeError("ProcessLifecycle.interrupt() called outside wait()")
        loop.call_soon_threadsafe(_resolve, interrupted)

    async def wait(self) -> int:
        """Start the loop and block until interrupted or the loop ends.

        Returns:
            The process exit status.
        """
        loop = asyncio.get_running_loop()
        outcome = loop.create_future()
        self._loop = loop
        self._interrupted = loop.create_future()
        interrupted = self._interrupted

        self._install_signal_handlers(loop)
        worker = threading.Thread(
            target=self._work,
            args=(loop, outcome),
            name="fibtrace-run-loop",
            daemon=True,
        )
        worker.start()
        try:
            done, _ = await asyncio.wait(
                {interrupted, outcome}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            self._remove_signal_handlers(loop)
            self._loop = None
            self._interrupted = None

        if interrupted in done:
            logger.info("Interrupted, abandoning run loop")
            self._console.info(FAREWELL)
            return EXIT_OK

        exc = outcome.exception()
        if exc is None:
            logger.info("Run loop finished")
            return EXIT_OK
        if isinstance(exc, FibonacciDomainError):
            logger.info("Run loop stopped: %s", exc.message)
        else:
            logger.error("Run loop crashed", exc_info=exc)
        self._console.error(str(exc))
        return EXIT_FAILURE

    def _work(self, loop: asyncio.AbstractEventLoop, outcome: asyncio.Future) -> None:
        error: Exception | None = None
        try:
            self._app.run()
        except Exception as exc:
            error = exc
        try:
            loop.call_soon_threadsafe(_resolve, outcome, error)
        except RuntimeError:
            # Event loop already closed: shutdown won the race.
            logger.debug("Run loop outcome dropped after shutdown: %r", error)

    def _install_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        for sig in self._signals:
            try:
                loop.add_signal_handler(sig, self.interrupt)
            except NotImplementedError:
                # Windows event loops have no add_signal_handler.
                signal.signal(sig, lambda _signum, _frame: self.interrupt())

    def _remove_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        for sig in self._signals:
            try:
                loop.remove_signal_handler(sig)
            except NotImplementedError:
                signal.signal(sig, signal.default_int_handler)
