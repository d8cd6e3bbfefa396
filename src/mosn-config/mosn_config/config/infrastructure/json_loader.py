"""JSON config loader — reads the file, decodes it, and emits observer events."""

from pathlib import Path

from mosn_config.config.domain.config import MosnConfig
from mosn_config.config.domain.observer import ConfigObserver
from mosn_config.config.infrastructure.errors import ConfigDecodeError, ConfigLoadError
from mosn_config.config.infrastructure.json_codec import decode_config


class JsonConfigLoader:
    """Loads and decodes a MosnConfig from a JSON file in a single pass."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> MosnConfig:
        """
        Read and decode the config file at path.

        Raises:
            ConfigLoadError: if the file is missing or cannot be read.
            ConfigDecodeError: if the content is not a valid config document.
        """
        path_str = str(path)
        self._observer.config_loading_started(path=path_str)

        try:
            content = _read_bytes(path=path)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            self._observer.config_loading_failed(path=path_str, reason=reason)
            raise ConfigLoadError(path=path, reason=reason) from exc

        try:
            cfg = decode_config(content)
        except ConfigDecodeError as exc:
            self._observer.config_loading_failed(path=path_str, reason=exc.reason)
            raise

        self._observer.config_loaded(
            path=path_str,
            servers=len(cfg.servers),
            clusters=len(cfg.cluster_manager.clusters),
        )
        return cfg


def _read_bytes(path: Path) -> bytes:
    with open(path, "rb") as fh:
        return fh.read()
