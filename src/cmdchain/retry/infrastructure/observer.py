"""Structlog implementation of the RetryObserver port."""

import structlog


class StructlogRetryObserver:
    """Delegates retry domain events to structlog.

    Satisfies the RetryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def retry_conflict_caught(self, command: str, attempt: int, reason: str) -> None:
        self._log.info(
            "retry.conflict_caught",
            command=command,
            attempt=attempt,
            reason=reason,
        )

    def retry_waiting(self, command: str, attempt: int, wait_ms: int) -> None:
        self._log.info(
            "retry.waiting",
            command=command,
            attempt=attempt,
            wait_ms=wait_ms,
        )

    def retry_wait_interrupted(self, command: str, attempt: int, wait_ms: int) -> None:
        self._log.debug(
            "retry.wait_interrupted",
            command=command,
            attempt=attempt,
            wait_ms=wait_ms,
        )

    def retry_succeeded(self, command: str, attempts: int) -> None:
        self._log.info("retry.succeeded", command=command, attempts=attempts)

    def retry_exhausted(self, command: str, max_retries: int, reason: str) -> None:
        self._log.error(
            "retry.exhausted",
            command=command,
            max_retries=max_retries,
            reason=reason,
        )
