"""Listener configuration model."""

from typing import ClassVar

from pydantic import Field, StrictBool, StrictStr

from mosn_config.config.domain.base import ConfigModel
from mosn_config.config.domain.filter import AccessLogConfig, FilterConfig


class ListenerConfig(ConfigModel):
    """A bind point with its filter chains and logging overrides.

    Names are not required to be unique at this layer.
    """

    omit_empty: ClassVar[frozenset[str]] = frozenset(
        {
            "name",
            "address",
            "stream_filters",
            "log_path",
            "log_level",
            "access_logs",
        }
    )

    name: StrictStr = ""
    address: StrictStr = ""
    bind_port: StrictBool = False
    network_filters: list[FilterConfig] = Field(default_factory=list)
    stream_filters: list[FilterConfig] = Field(default_factory=list)

    log_path: StrictStr = ""
    log_level: StrictStr = ""

    access_logs: list[AccessLogConfig] = Field(default_factory=list)

    # only honoured by the http2 codec
    disable_conn_io: StrictBool = False
