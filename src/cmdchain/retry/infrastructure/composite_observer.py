"""CompositeRetryObserver — fans out all events to a list of observers."""

from cmdchain.retry.domain.observer import RetryObserver


class CompositeRetryObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from RetryObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[RetryObserver]) -> None:
        self._observers = observers

    def retry_conflict_caught(self, command: str, attempt: int, reason: str) -> None:
        for obs in self._observers:
            obs.retry_conflict_caught(command=command, attempt=attempt, reason=reason)

    def retry_waiting(self, command: str, attempt: int, wait_ms: int) -> None:
        for obs in self._observers:
            obs.retry_waiting(command=command, attempt=attempt, wait_ms=wait_ms)

    def retry_wait_interrupted(self, command: str, attempt: int, wait_ms: int) -> None:
        for obs in self._observers:
            obs.retry_wait_interrupted(
                command=command, attempt=attempt, wait_ms=wait_ms
            )

    def retry_succeeded(self, command: str, attempts: int) -> None:
        for obs in self._observers:
            obs.retry_succeeded(command=command, attempts=attempts)

    def retry_exhausted(self, command: str, max_retries: int, reason: str) -> None:
        for obs in self._observers:
            obs.retry_exhausted(command=command, max_retries=max_retries, reason=reason)
