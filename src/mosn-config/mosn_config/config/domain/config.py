"""Top-level MosnConfig aggregate — the root of the deployment descriptor."""

from typing import ClassVar

from pydantic import Field

from mosn_config.config.domain.base import ConfigModel
from mosn_config.config.domain.cluster import ClusterManagerConfig
from mosn_config.config.domain.raw import RawResources
from mosn_config.config.domain.server import ServerConfig
from mosn_config.config.domain.service_registry import ServiceRegistryConfig

RAW_RESOURCE_KEYS = ("dynamic_resources", "static_resources")


class MosnConfig(ConfigModel):
    """Root configuration aggregate.

    Every section is optional. ``dynamic_resources`` and ``static_resources``
    are kept as raw JSON text for the resource managers that own them.
    """

    omit_empty: ClassVar[frozenset[str]] = frozenset(
        {"servers", *RAW_RESOURCE_KEYS}
    )

    servers: list[ServerConfig] = Field(default_factory=list)
    cluster_manager: ClusterManagerConfig = Field(default_factory=ClusterManagerConfig)
    service_registry: ServiceRegistryConfig = Field(
        default_factory=ServiceRegistryConfig
    )
    dynamic_resources: RawResources | None = None
    static_resources: RawResources | None = None
