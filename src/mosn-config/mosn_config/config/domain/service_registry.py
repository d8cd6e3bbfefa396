"""Service-registry self-registration models."""

from typing import ClassVar

from pydantic import Field, StrictBool, StrictStr

from mosn_config.config.domain.base import ConfigModel


class ServiceAppInfoConfig(ConfigModel):
    """Identity of the application publishing services."""

    omit_empty: ClassVar[frozenset[str]] = frozenset({"data_center", "app_name"})

    ant_share_cloud: StrictBool = False
    data_center: StrictStr = ""
    app_name: StrictStr = ""


class ServicePubInfoConfig(ConfigModel):
    omit_empty: ClassVar[frozenset[str]] = frozenset({"service_name", "pub_data"})

    service_name: StrictStr = ""
    pub_data: StrictStr = ""


class ServiceRegistryConfig(ConfigModel):
    """Metadata published for service discovery."""

    omit_empty: ClassVar[frozenset[str]] = frozenset({"publish_info"})

    application: ServiceAppInfoConfig = Field(default_factory=ServiceAppInfoConfig)
    publish_info: list[ServicePubInfoConfig] = Field(default_factory=list)
