"""Base exception class for all cmdchain-specific errors."""


class CommandError(Exception):
    """Base class for all cmdchain errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
