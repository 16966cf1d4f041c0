"""Tests for StructlogRetryObserver."""

from structlog.testing import capture_logs

from cmdchain.retry.infrastructure.observer import StructlogRetryObserver


class TestStructlogRetryObserver:
    def test_conflict_caught_logged_at_info(self) -> None:
        with capture_logs() as logs:
            StructlogRetryObserver().retry_conflict_caught(
                command="SaveOrder", attempt=1, reason="stale"
            )

        assert logs == [
            {
                "event": "retry.conflict_caught",
                "log_level": "info",
                "command": "SaveOrder",
                "attempt": 1,
                "reason": "stale",
            }
        ]

    def test_waiting_carries_wait_ms(self) -> None:
        with capture_logs() as logs:
            StructlogRetryObserver().retry_waiting(
                command="SaveOrder", attempt=2, wait_ms=50
            )

        assert logs[0]["event"] == "retry.waiting"
        assert logs[0]["wait_ms"] == 50

    def test_wait_interrupted_logged_at_debug(self) -> None:
        with capture_logs() as logs:
            StructlogRetryObserver().retry_wait_interrupted(
                command="SaveOrder", attempt=2, wait_ms=50
            )

        assert logs[0]["log_level"] == "debug"

    def test_succeeded_carries_attempts(self) -> None:
        with capture_logs() as logs:
            StructlogRetryObserver().retry_succeeded(command="SaveOrder", attempts=3)

        assert logs[0]["event"] == "retry.succeeded"
        assert logs[0]["attempts"] == 3

    def test_exhausted_logged_at_error(self) -> None:
        with capture_logs() as logs:
            StructlogRetryObserver().retry_exhausted(
                command="SaveOrder", max_retries=3, reason="stale"
            )

        assert logs[0]["event"] == "retry.exhausted"
        assert logs[0]["log_level"] == "error"
        assert logs[0]["max_retries"] == 3
