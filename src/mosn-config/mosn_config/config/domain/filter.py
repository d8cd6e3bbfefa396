"""Filter chain entry and access-log sink models."""

from typing import ClassVar

from pydantic import Field, JsonValue, StrictStr

from mosn_config.config.domain.base import ConfigModel


class FilterConfig(ConfigModel):
    """One filter instance in a listener's network or stream chain.

    ``config`` is deliberately untyped: its shape belongs to the filter named
    by ``type`` and is interpreted by that filter, not here.
    """

    omit_empty: ClassVar[frozenset[str]] = frozenset({"type", "config"})

    type: StrictStr = ""
    config: dict[str, JsonValue] = Field(default_factory=dict)


class AccessLogConfig(ConfigModel):
    """One access-log sink. An empty format selects the default template."""

    omit_empty: ClassVar[frozenset[str]] = frozenset({"log_path", "log_format"})

    log_path: StrictStr = ""
    log_format: StrictStr = ""
