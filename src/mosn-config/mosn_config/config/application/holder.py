"""ConfigHolder — owns the currently published config and the path it came from."""

import os
import threading
from pathlib import Path

from pydantic import BaseModel

from mosn_config.config.domain.config import MosnConfig
from mosn_config.config.domain.loader import ConfigLoader
from mosn_config.config.infrastructure.errors import ConfigNotLoadedError
from mosn_config.config.infrastructure.json_codec import encode_config


class PublishedConfig(BaseModel, frozen=True):
    """A loaded config paired with the absolute path it was read from."""

    config: MosnConfig
    path: Path


class ConfigHolder:
    """Explicit replacement for a process-wide config global.

    Construct one at start-up and hand it to the components that need the
    config. A holder is either unloaded or holds exactly one PublishedConfig;
    a reload swaps the whole snapshot at once, so readers that fetched
    ``published`` keep a consistent (config, path) pair.
    """

    def __init__(self, loader: ConfigLoader) -> None:
        self._loader = loader
        self._lock = threading.Lock()
        self._published: PublishedConfig | None = None

    def load(self, path: Path) -> MosnConfig:
        """
        Load the config at path and publish it.

        On failure nothing is published and any previous config stays current.

        Raises:
            ConfigLoadError: if the file cannot be read.
            ConfigDecodeError: if the file is not a valid config document.
        """
        cfg = self._loader.load(path=path)
        published = PublishedConfig(config=cfg, path=Path(os.path.abspath(path)))
        with self._lock:
            self._published = published
        return cfg

    @property
    def is_loaded(self) -> bool:
        return self._published is not None

    @property
    def published(self) -> PublishedConfig:
        with self._lock:
            published = self._published
        if published is None:
            raise ConfigNotLoadedError()
        return published

    @property
    def config(self) -> MosnConfig:
        return self.published.config

    @property
    def path(self) -> Path:
        return self.published.path

    def dump(self, indent: int | None = 2) -> str:
        """Re-serialise the published config; raw resource sections are unchanged."""
        return encode_config(self.config, indent=indent)
