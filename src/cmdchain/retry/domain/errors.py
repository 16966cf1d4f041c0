"""Error types raised by the retry executor itself."""

from cmdchain.command.domain.errors import OptimisticLockingConflict
from cmdchain.core.errors import CommandError


class RetriesExhaustedError(CommandError):
    """Raised when every attempt allowed by the retry budget ended in a conflict.

    Never retriable: an outer retry layer is a separate concern.
    """

    def __init__(self, max_retries: int, last_conflict: OptimisticLockingConflict) -> None:
        self.max_retries = max_retries
        self.last_conflict = last_conflict
        super().__init__(
            f"{max_retries} retries failed with {type(last_conflict).__name__}."
            " Giving up."
        )
