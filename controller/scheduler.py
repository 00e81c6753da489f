"""
Deferred, cancellable callbacks for the game controller.

The computer player "thinks" for a while before moving. That wait lives
here, outside the game engine, so a new game can cancel a pending move.
"""

import logging
import threading
from typing import Callable, Set

logger = logging.getLogger(__name__)


class DeferredScheduler:
    """
    Runs callbacks after a delay on a timer thread.

    Every task is a single-shot threading.Timer. cancel_all() drops every
    task that hasn't started yet.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._pending: Set[threading.Timer] = set()

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> threading.Timer:
        """
        Run callback after delay_ms milliseconds.

        Returns:
            The timer, in case the caller wants to cancel just this one.
        """
        timer = None

        def run():
            with self._lock:
                if timer not in self._pending:
                    return  # cancelled
                self._pending.discard(timer)
            callback()

        timer = threading.Timer(delay_ms / 1000.0, run)
        timer.daemon = True
        with self._lock:
            self._pending.add(timer)
        timer.start()
        logger.debug("Scheduled %s in %sms", getattr(callback, "__name__", callback), delay_ms)
        return timer

    def has_pending(self) -> bool:
        with self._lock:
            return bool(self._pending)

    def cancel_all(self):
        with self._lock:
            pending = list(self._pending)
            self._pending.clear()
        for timer in pending:
            timer.cancel()
        if pending:
            logger.debug("Cancelled %d pending task(s)", len(pending))


class ImmediateScheduler:
    """Runs callbacks straight away. Used for headless replays."""

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> None:
        callback()

    def has_pending(self) -> bool:
        return False

    def cancel_all(self):
        pass
