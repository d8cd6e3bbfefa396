"""Server configuration model."""

from typing import ClassVar

from pydantic import AliasChoices, Field, StrictInt, StrictStr

from mosn_config.config.domain.base import ConfigModel
from mosn_config.config.domain.duration import DurationConfig
from mosn_config.config.domain.listener import ListenerConfig


class ServerConfig(ConfigModel):
    """One server process: default logging, shutdown grace period and listeners."""

    omit_empty: ClassVar[frozenset[str]] = frozenset(
        {"default_log_path", "default_log_level", "listeners"}
    )

    default_log_path: StrictStr = ""
    default_log_level: StrictStr = ""

    graceful_timeout: DurationConfig = Field(default_factory=DurationConfig)

    # worker concurrency hint
    processor: StrictInt = Field(
        default=0, validation_alias=AliasChoices("processor", "Processor")
    )

    listeners: list[ListenerConfig] = Field(default_factory=list)
