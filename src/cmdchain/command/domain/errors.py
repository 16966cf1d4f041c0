"""Failures raised by commands and the stages that run them."""

from cmdchain.core.errors import CommandError


class OptimisticLockingConflict(CommandError):
    """Raised when persisted state changed between a command's read and its write.

    The version stamp read by the command no longer matches the stored one,
    so re-running the whole command against fresh state may succeed.
    """

    def __init__(self, reason: str, entity: str | None = None) -> None:
        self.reason = reason
        self.entity = entity
        target = f" on {entity}" if entity else ""
        super().__init__(f"Optimistic locking conflict{target}: {reason}", retriable=True)


class CommandExecutionError(CommandError):
    """Raised by a command that failed for a reason a retry cannot fix."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to execute command: {reason}")
