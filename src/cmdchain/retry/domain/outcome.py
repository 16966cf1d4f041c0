"""Classification of downstream failures into retryable and terminal kinds."""

from enum import StrEnum

from cmdchain.command.domain.errors import OptimisticLockingConflict


class FailureKind(StrEnum):
    CONFLICT = "conflict"
    OTHER = "other"


def classify_failure(exc: BaseException) -> FailureKind:
    """Only an optimistic-locking conflict is worth re-running the command for."""
    match exc:
        case OptimisticLockingConflict():
            return FailureKind.CONFLICT
        case _:
            return FailureKind.OTHER
