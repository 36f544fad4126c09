"""Value types exchanged with the stack API.

Server-owned snapshots are parsed leniently: the server may omit fields or send
``null``, and the panel must still render whatever it got.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

JsonBody = Any  # parsed JSON value or raw response text


@dataclass(frozen=True, slots=True)
class PortSpec:
    container_port: int
    protocol: str = "TCP"

    def to_dict(self) -> dict[str, Any]:
        return {"container_port": self.container_port, "protocol": self.protocol}


@dataclass(frozen=True, slots=True)
class PortMapping:
    container_port: int | None
    protocol: str | None
    node_port: int | None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PortMapping:
        return cls(
            container_port=_opt_int(data.get("container_port")),
            protocol=_opt_str(data.get("protocol")),
            node_port=_opt_int(data.get("node_port")),
        )


@dataclass(frozen=True, slots=True)
class StackSummary:
    """One stack as reported by ``GET /stacks`` or ``POST /stacks``."""

    stack_id: str
    namespace: str | None = None
    pod_id: str | None = None
    service_name: str | None = None
    node_id: str | None = None
    node_public_ip: str | None = None
    ports: tuple[PortMapping, ...] | None = None
    ttl_expires_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    requested_cpu_milli: int | None = None
    requested_memory_bytes: int | None = None
    status: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StackSummary:
        ports_raw = data.get("ports")
        ports: tuple[PortMapping, ...] | None = None
        if isinstance(ports_raw, list):
            ports = tuple(PortMapping.from_dict(p) for p in ports_raw if isinstance(p, Mapping))
        return cls(
            stack_id=str(data.get("stack_id") or ""),
            namespace=_opt_str(data.get("namespace")),
            pod_id=_opt_str(data.get("pod_id")),
            service_name=_opt_str(data.get("service_name")),
            node_id=_opt_str(data.get("node_id")),
            node_public_ip=_opt_str(data.get("node_public_ip")),
            ports=ports,
            ttl_expires_at=_opt_str(data.get("ttl_expires_at")),
            created_at=_opt_str(data.get("created_at")),
            updated_at=_opt_str(data.get("updated_at")),
            requested_cpu_milli=_opt_int(data.get("requested_cpu_milli")),
            requested_memory_bytes=_opt_int(data.get("requested_memory_bytes")),
            status=_opt_str(data.get("status")),
        )


@dataclass(frozen=True, slots=True)
class ActionRequest:
    method: str
    path: str
    body: JsonBody | None = None


@dataclass(frozen=True, slots=True)
class ResponsePayload:
    """Outcome of one HTTP call, success or not."""

    method: str
    url: str
    status: int
    ok: bool
    body: JsonBody

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "status": self.status,
            "ok": self.ok,
            "body": self.body,
        }


def parse_stack_list(body: JsonBody) -> list[StackSummary]:
    """Extract summaries from a ``{"stacks": [...]}`` body. Anything else is an empty list."""
    if not isinstance(body, Mapping):
        return []
    items = body.get("stacks")
    if not isinstance(items, list):
        return []
    return [StackSummary.from_dict(item) for item in items if isinstance(item, Mapping)]


def _opt_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _opt_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
