"""Data models for configuration items, services, instances and heartbeats."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields
from datetime import timedelta
from typing import Any, Mapping

__all__ = [
    "State",
    "ConfigItem",
    "ConfigPage",
    "ConfigListenContext",
    "ConfigContext",
    "Instance",
    "Service",
    "ServiceDetail",
    "ServiceInfo",
    "ServiceSelector",
    "Cluster",
    "ClusterHealthChecker",
    "BeatInfo",
    "ExpressionSelector",
    "ServiceList",
]


class State(enum.IntEnum):
    """Lifecycle state of a heartbeat task."""

    RUNNING = 0
    SHUTDOWN = 1


def _param(name: str, **kwargs: Any) -> Any:
    return field(metadata={"param": name}, **kwargs)


def _json(name: str, **kwargs: Any) -> Any:
    return field(metadata={"json": name}, **kwargs)


def _json_fields(obj: Any) -> dict[str, Any]:
    return {
        f.metadata["json"]: getattr(obj, f.name)
        for f in fields(obj)
        if "json" in f.metadata
    }


@dataclass
class ConfigItem:
    """A single configuration entry as returned by a search."""

    id: str = _param("id", default="")
    data_id: str = _param("dataId", default="")
    group: str = _param("group", default="")
    content: str = _param("content", default="")
    md5: str = _param("md5", default="")
    tenant: str = _param("tenant", default="")
    appname: str = _param("appname", default="")


@dataclass
class ConfigPage:
    """A page of configuration search results."""

    total_count: int = _param("totalCount", default=0)
    page_number: int = _param("pageNumber", default=0)
    pages_available: int = _param("pagesAvailable", default=0)
    page_items: list[ConfigItem] = _param("pageItems", default_factory=list)


@dataclass
class ConfigListenContext:
    """Identifies a configuration being listened to, with its known MD5."""

    group: str = _json("group", default="")
    md5: str = _json("md5", default="")
    data_id: str = _json("dataId", default="")
    tenant: str = _json("tenant", default="")


@dataclass
class ConfigContext:
    """Identifies a configuration by group, data id and tenant."""

    group: str = _json("group", default="")
    data_id: str = _json("dataId", default="")
    tenant: str = _json("tenant", default="")


@dataclass
class Instance:
    """A registered service instance."""

    instance_id: str = _json("instanceId", default="")
    ip: str = _json("ip", default="")
    port: int = _json("port", default=0)
    weight: float = _json("weight", default=0.0)
    healthy: bool = _json("healthy", default=False)
    enable: bool = _json("enabled", default=False)
    ephemeral: bool = _json("ephemeral", default=False)
    cluster_name: str = _json("clusterName", default="")
    service_name: str = _json("serviceName", default="")
    metadata: dict[str, str] = _json("metadata", default_factory=dict)
    instance_heart_beat_interval: int = _json("instanceHeartBeatInterval", default=0)
    ip_delete_timeout: int = _json("ipDeleteTimeout", default=0)
    instance_heart_beat_time_out: int = _json("instanceHeartBeatTimeOut", default=0)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this instance."""
        data = _json_fields(self)
        data["metadata"] = dict(self.metadata)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Instance:
        """Build an instance from a decoded JSON object; missing keys keep defaults."""
        return cls(
            instance_id=str(data.get("instanceId", "")),
            ip=str(data.get("ip", "")),
            port=int(data.get("port", 0)),
            weight=float(data.get("weight", 0.0)),
            healthy=bool(data.get("healthy", False)),
            enable=bool(data.get("enabled", False)),
            ephemeral=bool(data.get("ephemeral", False)),
            cluster_name=str(data.get("clusterName", "")),
            service_name=str(data.get("serviceName", "")),
            metadata=dict(data.get("metadata") or {}),
            instance_heart_beat_interval=int(data.get("instanceHeartBeatInterval", 0)),
            ip_delete_timeout=int(data.get("ipDeleteTimeout", 0)),
            instance_heart_beat_time_out=int(data.get("instanceHeartBeatTimeOut", 0)),
        )


@dataclass
class Service:
    """A service and the instances currently serving it."""

    cache_millis: int = _json("cacheMillis", default=0)
    hosts: list[Instance] = _json("hosts", default_factory=list)
    checksum: str = _json("checksum", default="")
    last_ref_time: int = _json("lastRefTime", default=0)
    clusters: str = _json("clusters", default="")
    name: str = _json("name", default="")
    group_name: str = _json("groupName", default="")
    valid: bool = _json("valid", default=False)
    all_ips: bool = _json("allIPs", default=False)
    reach_protection_threshold: bool = _json("reachProtectionThreshold", default=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this service."""
        data = _json_fields(self)
        data["hosts"] = [host.to_dict() for host in self.hosts]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Service:
        """Build a service from a decoded JSON object; missing keys keep defaults."""
        return cls(
            cache_millis=int(data.get("cacheMillis", 0)),
            hosts=[Instance.from_dict(h) for h in data.get("hosts") or []],
            checksum=str(data.get("checksum", "")),
            last_ref_time=int(data.get("lastRefTime", 0)),
            clusters=str(data.get("clusters", "")),
            name=str(data.get("name", "")),
            group_name=str(data.get("groupName", "")),
            valid=bool(data.get("valid", False)),
            all_ips=bool(data.get("allIPs", False)),
            reach_protection_threshold=bool(data.get("reachProtectionThreshold", False)),
        )


@dataclass
class ServiceSelector:
    """Selector expression attached to a service."""

    selector: str = _json("Selector", default="")


@dataclass
class ServiceInfo:
    """Descriptive information about a service."""

    app: str = _json("app", default="")
    group: str = _json("group", default="")
    health_check_mode: str = _json("healthCheckMode", default="")
    metadata: dict[str, str] = _json("metadata", default_factory=dict)
    name: str = _json("name", default="")
    protect_threshold: float = _json("protectThreshold", default=0.0)
    selector: ServiceSelector = _json("selector", default_factory=ServiceSelector)


@dataclass
class ClusterHealthChecker:
    """Health checker type used by a cluster."""

    type: str = _json("type", default="")


@dataclass
class Cluster:
    """A cluster of instances within a service."""

    service_name: str = _json("serviceName", default="")
    name: str = _json("name", default="")
    healthy_checker: ClusterHealthChecker = _json(
        "healthyChecker", default_factory=ClusterHealthChecker
    )
    default_port: int = _json("defaultPort", default=0)
    default_check_port: int = _json("defaultCheckPort", default=0)
    use_ip_port_for_check: bool = _json("useIpPort4Check", default=False)
    metadata: dict[str, str] = _json("metadata", default_factory=dict)


@dataclass
class ServiceDetail:
    """A service together with its clusters."""

    service: ServiceInfo = _json("service", default_factory=ServiceInfo)
    clusters: list[Cluster] = _json("clusters", default_factory=list)


@dataclass
class BeatInfo:
    """Heartbeat payload for an instance; period and state are local only."""

    ip: str = _json("ip", default="")
    port: int = _json("port", default=0)
    weight: float = _json("weight", default=0.0)
    service_name: str = _json("serviceName", default="")
    cluster: str = _json("cluster", default="")
    metadata: dict[str, str] = _json("metadata", default_factory=dict)
    scheduled: bool = _json("scheduled", default=False)
    period: timedelta = timedelta(0)
    state: State = State.RUNNING

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping, without period and state."""
        data = _json_fields(self)
        data["metadata"] = dict(self.metadata)
        return data


@dataclass
class ExpressionSelector:
    """A typed selector expression."""

    type: str = _json("type", default="")
    expression: str = _json("expression", default="")


@dataclass
class ServiceList:
    """A count of services and their names."""

    count: int = _json("count", default=0)
    doms: list[str] = _json("doms", default_factory=list)