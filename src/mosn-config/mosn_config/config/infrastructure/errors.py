"""Error types raised by config infrastructure."""

from pathlib import Path

from mosn_config.core.errors import MosnConfigError


class ConfigLoadError(MosnConfigError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load config: {path}: {reason}")


class ConfigDecodeError(MosnConfigError):
    """Raised when the config text is not valid JSON or violates the schema."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to decode config: {reason}")


class ConfigNotLoadedError(MosnConfigError):
    """Raised when a holder is read before any config was published."""

    def __init__(self) -> None:
        super().__init__("Failed to read config: no config has been loaded")
