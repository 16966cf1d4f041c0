"""Waiter Protocol — the suspension primitive used between retry attempts."""

from typing import Protocol


class Waiter(Protocol):
    def wait(self, duration_ms: int) -> bool:
        """Block for duration_ms. Return False if the wait was cut short."""
        ...
