"""Explicit composition of interceptor stages into a single executor."""

from collections.abc import Callable, Sequence

from cmdchain.command.domain.executor import CommandExecutor

type Stage = Callable[[CommandExecutor], CommandExecutor]


def compose_pipeline(
    stages: Sequence[Stage], terminal: CommandExecutor
) -> CommandExecutor:
    """
    Wrap terminal in each stage and return the outermost executor.

    The first stage in ``stages`` becomes the outermost link, so a command
    passes through the stages in list order before reaching ``terminal``.
    """
    executor = terminal
    for stage in reversed(stages):
        executor = stage(executor)
    return executor
