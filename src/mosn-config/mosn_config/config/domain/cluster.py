"""Upstream topology models — cluster manager, clusters and their hosts."""

from typing import ClassVar

from pydantic import AliasChoices, Field, StrictBool, StrictStr

from mosn_config.config.domain.base import ConfigModel, Uint32
from mosn_config.config.domain.duration import DurationConfig


class HostConfig(ConfigModel):
    """One upstream endpoint. Weight is passed through unnormalised."""

    omit_empty: ClassVar[frozenset[str]] = frozenset(
        {"address", "hostname", "weight"}
    )

    address: StrictStr = ""
    hostname: StrictStr = ""
    weight: Uint32 = 0


class HealthCheckConfig(ConfigModel):
    """Health-check policy for a cluster."""

    omit_empty: ClassVar[frozenset[str]] = frozenset({"check_path", "service_name"})

    timeout: DurationConfig = Field(
        default_factory=DurationConfig,
        validation_alias=AliasChoices("timeout", "Timeout"),
    )
    healthy_threshold: Uint32 = 0
    unhealthy_threshold: Uint32 = 0
    interval: DurationConfig = Field(
        default_factory=DurationConfig,
        validation_alias=AliasChoices("interval", "Interval"),
    )
    interval_jitter: DurationConfig = Field(default_factory=DurationConfig)
    check_path: StrictStr = ""
    service_name: StrictStr = ""


class ThresholdConfig(ConfigModel):
    """Circuit-breaker limits for one routing priority."""

    priority: StrictStr = ""
    max_connections: Uint32 = 0
    max_pending_requests: Uint32 = 0
    max_requests: Uint32 = 0
    max_retries: Uint32 = 0


class CircuitBreakersConfig(ConfigModel):
    omit_empty: ClassVar[frozenset[str]] = frozenset({"thresholds"})

    thresholds: list[ThresholdConfig] = Field(default_factory=list)


class SubscribeSpecConfig(ConfigModel):
    omit_empty: ClassVar[frozenset[str]] = frozenset({"service_name"})

    service_name: StrictStr = ""


class ClusterSpecConfig(ConfigModel):
    """Services a cluster subscribes to through the registry."""

    omit_empty: ClassVar[frozenset[str]] = frozenset({"subscribe"})

    subscribe: list[SubscribeSpecConfig] = Field(default_factory=list)


class ClusterConfig(ConfigModel):
    """A named group of upstream hosts.

    ``name`` is the key consumers join on; uniqueness is not checked here.
    """

    omit_empty: ClassVar[frozenset[str]] = frozenset({"hosts"})

    name: StrictStr = Field(default="", validation_alias=AliasChoices("name", "Name"))
    type: StrictStr = Field(default="", validation_alias=AliasChoices("type", "Type"))
    sub_type: StrictStr = ""
    lb_type: StrictStr = ""
    max_request_per_conn: Uint32 = Field(
        default=0,
        validation_alias=AliasChoices("max_request_per_conn", "MaxRequestPerConn"),
    )
    circuit_breakers: CircuitBreakersConfig = Field(
        default_factory=CircuitBreakersConfig
    )
    health_check: HealthCheckConfig = Field(default_factory=HealthCheckConfig)
    spec: ClusterSpecConfig = Field(default_factory=ClusterSpecConfig)
    hosts: list[HostConfig] = Field(default_factory=list)


class ClusterManagerConfig(ConfigModel):
    omit_empty: ClassVar[frozenset[str]] = frozenset({"clusters"})

    auto_discovery: StrictBool = False
    clusters: list[ClusterConfig] = Field(default_factory=list)
