"""Observer port for the retry domain — defines events in domain language."""

from typing import Protocol


class RetryObserver(Protocol):
    """Observer port emitting structured events while a command is retried.

    Implementations may log to structlog, record for tests, or emit metrics.
    ``command`` is the command's class name.
    """

    def retry_conflict_caught(self, command: str, attempt: int, reason: str) -> None: ...

    def retry_waiting(self, command: str, attempt: int, wait_ms: int) -> None: ...

    def retry_wait_interrupted(
        self, command: str, attempt: int, wait_ms: int
    ) -> None: ...

    def retry_succeeded(self, command: str, attempts: int) -> None: ...

    def retry_exhausted(self, command: str, max_retries: int, reason: str) -> None: ...
