"""CommandInvoker — the terminal pipeline stage that actually runs the command."""

from typing import TypeVar

from cmdchain.command.domain.command import AsyncCommand, Command, CommandConfig

T = TypeVar("T")


class CommandInvoker:
    """Runs the command itself. Satisfies the CommandExecutor protocol structurally."""

    def execute(self, config: CommandConfig, command: Command[T]) -> T:
        return command.execute(config)


class AsyncCommandInvoker:
    """Awaits the command itself. Satisfies AsyncCommandExecutor structurally."""

    async def execute(self, config: CommandConfig, command: AsyncCommand[T]) -> T:
        return await command.execute(config)
