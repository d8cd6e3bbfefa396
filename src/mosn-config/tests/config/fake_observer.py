"""Fake ConfigObserver for use in tests — records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoadingStartedEvent:
    path: str


@dataclass(frozen=True)
class LoadedEvent:
    path: str
    servers: int
    clusters: int


@dataclass(frozen=True)
class LoadingFailedEvent:
    path: str
    reason: str


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loading_started: list[LoadingStartedEvent] = []
        self.loaded: list[LoadedEvent] = []
        self.loading_failed: list[LoadingFailedEvent] = []

    def config_loading_started(self, path: str) -> None:
        self.loading_started.append(LoadingStartedEvent(path=path))

    def config_loaded(self, path: str, servers: int, clusters: int) -> None:
        self.loaded.append(LoadedEvent(path=path, servers=servers, clusters=clusters))

    def config_loading_failed(self, path: str, reason: str) -> None:
        self.loading_failed.append(LoadingFailedEvent(path=path, reason=reason))
