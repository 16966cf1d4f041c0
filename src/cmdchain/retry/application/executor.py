"""RetryExecutor — re-runs a command when the downstream stage reports an optimistic-locking conflict."""

import asyncio
from typing import TypeVar, cast

from cmdchain.command.domain.command import AsyncCommand, Command, CommandConfig
from cmdchain.command.domain.errors import OptimisticLockingConflict
from cmdchain.command.domain.executor import AsyncCommandExecutor, CommandExecutor
from cmdchain.retry.domain.backoff import backoff_schedule
from cmdchain.retry.domain.errors import RetriesExhaustedError
from cmdchain.retry.domain.observer import RetryObserver
from cmdchain.retry.domain.outcome import FailureKind, classify_failure
from cmdchain.retry.domain.policy import RetryPolicy
from cmdchain.retry.domain.waiter import Waiter

T = TypeVar("T")


class _RetryPolicyAccessors:
    """Get/set accessors for the three retry tunables.

    Each setter swaps in a validated copy of the frozen policy. Executions
    already in flight keep the policy they started with.
    """

    _policy: RetryPolicy

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    @property
    def max_retries(self) -> int:
        return self._policy.max_retries

    @max_retries.setter
    def max_retries(self, value: int) -> None:
        self._replace_policy(max_retries=value)

    @property
    def initial_wait_ms(self) -> int:
        return self._policy.initial_wait_ms

    @initial_wait_ms.setter
    def initial_wait_ms(self, value: int) -> None:
        self._replace_policy(initial_wait_ms=value)

    @property
    def backoff_factor(self) -> int:
        return self._policy.backoff_factor

    @backoff_factor.setter
    def backoff_factor(self, value: int) -> None:
        self._replace_policy(backoff_factor=value)

    def _replace_policy(self, **changes: int) -> None:
        # model_copy(update=...) skips validation, so rebuild through the constructor.
        self._policy = RetryPolicy.model_validate(
            {**self._policy.model_dump(), **changes}
        )


class RetryExecutor(_RetryPolicyAccessors):
    """Interceptor that retries the downstream stage on optimistic-locking conflicts.

    Attempts run strictly one after another on the calling thread. Between
    attempts the caller is blocked by the injected waiter for a delay that
    starts at ``initial_wait_ms`` and is multiplied by ``backoff_factor``
    after every retry. Any failure other than a conflict propagates untouched.

    The executor is free of infrastructure dependencies: the observer and the
    waiter are injected so tests can record events and skip real sleeps.
    """

    def __init__(
        self,
        next_executor: CommandExecutor,
        observer: RetryObserver,
        waiter: Waiter,
        policy: RetryPolicy | None = None,
    ) -> None:
        self._next = next_executor
        self._observer = observer
        self._waiter = waiter
        self._policy = policy or RetryPolicy()

    def execute(self, config: CommandConfig, command: Command[T]) -> T:
        """Run command through the next stage, retrying on conflicts.

        Raises:
            RetriesExhaustedError: if the first attempt and all max_retries
                retries ended in an OptimisticLockingConflict.
            Exception: any non-conflict failure from the next stage, unchanged.
        """
        policy = self._policy
        command_name = type(command).__name__
        waits = backoff_schedule(policy)
        attempts = 0
        last_conflict: OptimisticLockingConflict | None = None

        while attempts <= policy.max_retries:
            if attempts > 0:
                wait_ms = next(waits)
                self._observer.retry_waiting(
                    command=command_name, attempt=attempts + 1, wait_ms=wait_ms
                )
                if not self._waiter.wait(wait_ms):
                    self._observer.retry_wait_interrupted(
                        command=command_name, attempt=attempts + 1, wait_ms=wait_ms
                    )

            try:
                result = self._next.execute(config, command)
            except Exception as exc:
                match classify_failure(exc):
                    case FailureKind.CONFLICT:
                        last_conflict = cast(OptimisticLockingConflict, exc)
                        self._observer.retry_conflict_caught(
                            command=command_name, attempt=attempts + 1, reason=str(exc)
                        )
                    case _:
                        raise
            else:
                if attempts > 0:
                    self._observer.retry_succeeded(
                        command=command_name, attempts=attempts + 1
                    )
                return result

            attempts += 1

        raise _exhausted(
            self._observer, command_name, policy, last_conflict
        ) from last_conflict


class AsyncRetryExecutor(_RetryPolicyAccessors):
    """Coroutine flavour of RetryExecutor.

    The backoff is an ``asyncio.sleep``. Cancelling the task while it waits
    (or while the next stage runs) raises CancelledError, which is never
    treated as a conflict and always propagates.
    """

    def __init__(
        self,
        next_executor: AsyncCommandExecutor,
        observer: RetryObserver,
        policy: RetryPolicy | None = None,
    ) -> None:
        self._next = next_executor
        self._observer = observer
        self._policy = policy or RetryPolicy()

    async def execute(self, config: CommandConfig, command: AsyncCommand[T]) -> T:
        """Await command through the next stage, retrying on conflicts.

        Raises:
            RetriesExhaustedError: if the first attempt and all max_retries
                retries ended in an OptimisticLockingConflict.
            asyncio.CancelledError: if the task is cancelled during a backoff
                sleep or while the next stage runs. No further attempt is made.
            Exception: any non-conflict failure from the next stage, unchanged.
        """
        policy = self._policy
        command_name = type(command).__name__
        waits = backoff_schedule(policy)
        attempts = 0
        last_conflict: OptimisticLockingConflict | None = None

        while attempts <= policy.max_retries:
            if attempts > 0:
                wait_ms = next(waits)
                self._observer.retry_waiting(
                    command=command_name, attempt=attempts + 1, wait_ms=wait_ms
                )
                await asyncio.sleep(wait_ms / 1000)

            try:
                result = await self._next.execute(config, command)
            except Exception as exc:
                match classify_failure(exc):
                    case FailureKind.CONFLICT:
                        last_conflict = cast(OptimisticLockingConflict, exc)
                        self._observer.retry_conflict_caught(
                            command=command_name, attempt=attempts + 1, reason=str(exc)
                        )
                    case _:
                        raise
            else:
                if attempts > 0:
                    self._observer.retry_succeeded(
                        command=command_name, attempts=attempts + 1
                    )
                return result

            attempts += 1

        raise _exhausted(
            self._observer, command_name, policy, last_conflict
        ) from last_conflict


def _exhausted(
    observer: RetryObserver,
    command_name: str,
    policy: RetryPolicy,
    last_conflict: OptimisticLockingConflict | None,
) -> RetriesExhaustedError:
    """Emit the exhaustion event and build the terminal error."""
    # The loop always runs at least once, so a conflict was recorded.
    assert last_conflict is not None
    observer.retry_exhausted(
        command=command_name,
        max_retries=policy.max_retries,
        reason=str(last_conflict),
    )
    return RetriesExhaustedError(
        max_retries=policy.max_retries, last_conflict=last_conflict
    )
