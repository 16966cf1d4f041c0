"""Backoff arithmetic for RetryPolicy.

Waits are integer milliseconds and grow without a clamp. Python integers
never overflow, but a wait can still exceed what a blocking primitive accepts;
waiters clamp at that boundary.
"""

from collections.abc import Iterator

from cmdchain.retry.domain.policy import RetryPolicy


def backoff_schedule(policy: RetryPolicy) -> Iterator[int]:
    """Yield the wait before each retry, in order, for the full retry budget."""
    wait = policy.initial_wait_ms
    for _ in range(policy.max_retries):
        yield wait
        wait *= policy.backoff_factor


def backoff_exceeds(policy: RetryPolicy, threshold_ms: int) -> bool:
    """
    Return True if the waits of a command that always conflicts add up to more than threshold_ms.

    Stops as soon as the running total passes the threshold, so huge retry
    budgets cost at most a handful of steps.
    """
    if policy.initial_wait_ms == 0 or policy.max_retries == 0:
        return False
    if policy.backoff_factor == 1:
        return policy.initial_wait_ms * policy.max_retries > threshold_ms
    total = 0
    for wait in backoff_schedule(policy):
        total += wait
        if total > threshold_ms:
            return True
    return False
