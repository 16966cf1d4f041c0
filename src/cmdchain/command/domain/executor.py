"""Executor Protocols — the single operation every pipeline stage exposes."""

from typing import Protocol, TypeVar

from cmdchain.command.domain.command import AsyncCommand, Command, CommandConfig

T = TypeVar("T")


class CommandExecutor(Protocol):
    """A pipeline stage. Interceptors wrap another CommandExecutor."""

    def execute(self, config: CommandConfig, command: Command[T]) -> T: ...


class AsyncCommandExecutor(Protocol):
    """A pipeline stage whose execute is a coroutine."""

    async def execute(self, config: CommandConfig, command: AsyncCommand[T]) -> T: ...
