"""Tests for failure classification."""

from cmdchain.command.domain.errors import (
    CommandExecutionError,
    OptimisticLockingConflict,
)
from cmdchain.core.errors import CommandError
from cmdchain.retry.domain.outcome import FailureKind, classify_failure


class StaleVersionConflict(OptimisticLockingConflict):
    pass


class TestClassifyFailure:
    def test_conflict_is_classified_as_conflict(self) -> None:
        assert classify_failure(OptimisticLockingConflict(reason="x")) is FailureKind.CONFLICT

    def test_conflict_subclass_is_classified_as_conflict(self) -> None:
        assert classify_failure(StaleVersionConflict(reason="x")) is FailureKind.CONFLICT

    def test_command_execution_error_is_other(self) -> None:
        assert classify_failure(CommandExecutionError(reason="x")) is FailureKind.OTHER

    def test_retriable_flag_alone_does_not_make_a_conflict(self) -> None:
        assert classify_failure(CommandError("x", retriable=True)) is FailureKind.OTHER

    def test_builtin_exception_is_other(self) -> None:
        assert classify_failure(RuntimeError("x")) is FailureKind.OTHER
