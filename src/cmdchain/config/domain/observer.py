"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(
        self, name: str, max_retries: int, initial_wait_ms: int, backoff_factor: int
    ) -> None: ...

    def config_long_backoff_warning(self, threshold_ms: int) -> None: ...
