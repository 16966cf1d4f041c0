"""Command Protocol and the pass-through configuration every stage receives."""

from typing import Literal, Protocol, TypeVar

from pydantic import BaseModel

T_co = TypeVar("T_co", covariant=True)

type TransactionPropagation = Literal["required", "requires_new", "not_supported"]


class CommandConfig(BaseModel, frozen=True):
    """Execution settings handed unchanged from stage to stage.

    No stage in this package interprets these fields; they exist for
    interceptors further down the chain.
    """

    context_reusable: bool = True
    transaction_propagation: TransactionPropagation = "required"


class Command(Protocol[T_co]):
    """A unit of work that produces a result of type T when executed."""

    def execute(self, config: CommandConfig) -> T_co: ...


class AsyncCommand(Protocol[T_co]):
    """Coroutine flavour of Command."""

    async def execute(self, config: CommandConfig) -> T_co: ...
