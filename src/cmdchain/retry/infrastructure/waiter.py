"""InterruptibleWaiter — a blocking Waiter that another thread can cut short."""

import threading

# Longest wait threading accepts, in whole milliseconds.
_MAX_WAIT_MS = int(threading.TIMEOUT_MAX) * 1000


class InterruptibleWaiter:
    """Blocks on a threading.Event so that interrupt() wakes the threads waiting on it.

    An interrupted wait returns False and the retry executor moves straight on
    to its next attempt. The woken waiter clears the event so that later waits
    run their full duration. Waits longer than threading.TIMEOUT_MAX are
    capped at that limit.
    """

    def __init__(self) -> None:
        self._interrupted = threading.Event()

    def wait(self, duration_ms: int) -> bool:
        if duration_ms <= 0:
            return True
        if duration_ms >= _MAX_WAIT_MS:
            timeout = threading.TIMEOUT_MAX
        else:
            timeout = duration_ms / 1000
        woken_early = self._interrupted.wait(timeout=timeout)
        if woken_early:
            self._interrupted.clear()
        return not woken_early

    def interrupt(self) -> None:
        self._interrupted.set()
