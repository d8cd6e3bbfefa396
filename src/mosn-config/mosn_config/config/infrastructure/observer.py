"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loading_started(self, path: str) -> None:
        self._log.info("config.loading_started", path=path)

    def config_loaded(self, path: str, servers: int, clusters: int) -> None:
        self._log.info(
            "config.loaded",
            path=path,
            servers=servers,
            clusters=clusters,
        )

    def config_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("config.loading_failed", path=path, reason=reason)
