"""ConfigLoader Protocol — structural interface for loading a MosnConfig from disk."""

from pathlib import Path
from typing import Protocol

from mosn_config.config.domain.config import MosnConfig


class ConfigLoader(Protocol):
    """Reads and decodes the config file at path, raising a typed error on failure."""

    def load(self, path: Path) -> MosnConfig: ...
