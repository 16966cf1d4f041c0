"""Top-level PipelineConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from cmdchain.retry.domain.policy import RetryPolicy


class PipelineConfig(BaseModel, frozen=True):
    """Root configuration aggregate for one command pipeline."""

    name: str = Field(min_length=1)
    retry: RetryPolicy = RetryPolicy()
