"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loading_started(self, path: str) -> None: ...

    def config_loaded(self, path: str, servers: int, clusters: int) -> None: ...

    def config_loading_failed(self, path: str, reason: str) -> None: ...
