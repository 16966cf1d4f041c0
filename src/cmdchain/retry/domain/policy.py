"""RetryPolicy — the three tunables of the optimistic-locking retry executor."""

from pydantic import BaseModel, Field


class RetryPolicy(BaseModel, frozen=True):
    """Retry budget and exponential backoff settings.

    Attributes:
        max_retries: additional attempts after the first one.
        initial_wait_ms: delay before the first retry.
        backoff_factor: multiplier applied to the delay after each retry.
    """

    max_retries: int = Field(default=3, ge=0)
    initial_wait_ms: int = Field(default=50, ge=0)
    backoff_factor: int = Field(default=5, ge=1)
