"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(
        self, name: str, max_retries: int, initial_wait_ms: int, backoff_factor: int
    ) -> None:
        self._log.info(
            "config.loaded",
            name=name,
            max_retries=max_retries,
            initial_wait_ms=initial_wait_ms,
            backoff_factor=backoff_factor,
        )

    def config_long_backoff_warning(self, threshold_ms: int) -> None:
        self._log.warning(
            "config.long_backoff_warning",
            threshold_ms=threshold_ms,
            message="A command that always conflicts can block its caller longer than this",
        )
