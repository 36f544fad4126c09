"""Port specification parsing and ``target_port`` encoding.

The create form takes free text. Accepted input shapes:

- a single port: ``80`` or ``80/udp``
- a comma separated list: ``80, 443/tcp``
- a JSON array literal: ``[80, 443]`` or ``[{"container_port": 80, "protocol": "TCP"}]``

Input is normalized into :class:`PortSpec` values first; the wire shape is chosen
separately by :func:`encode_target_port`, because the service has been seen
accepting both an integer and an array for ``target_port``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from stackdesk.config import MAX_TARGET_PORTS
from stackdesk.core.errors import ValidationError
from stackdesk.domain.models import PortSpec

ENCODING_LIST = "list"
ENCODING_INT = "int"
ENCODINGS = (ENCODING_LIST, ENCODING_INT)

PROTOCOLS = ("TCP", "UDP")


def parse_target_ports(text: str) -> list[PortSpec]:
    raw = (text or "").strip()
    if not raw:
        raise ValidationError("target_port is required")
    if raw.startswith("["):
        try:
            items = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"target_port is not a valid JSON array: {exc.msg}", exc) from exc
        if not isinstance(items, list):
            raise ValidationError("target_port JSON must be an array")
        specs = [_spec_from_json(item) for item in items]
    else:
        specs = [_spec_from_token(tok) for tok in raw.split(",")]
    return _validate(specs)


def check_encoding(encoding: str) -> str:
    if encoding not in ENCODINGS:
        raise ValidationError(f"unknown target_port encoding {encoding!r}; expected one of {ENCODINGS}")
    return encoding


def encode_target_port(specs: list[PortSpec], encoding: str = ENCODING_LIST) -> Any:
    check_encoding(encoding)
    if encoding == ENCODING_INT:
        if len(specs) != 1 or specs[0].protocol != "TCP":
            raise ValidationError("integer target_port encoding supports exactly one TCP port")
        return specs[0].container_port
    return [s.to_dict() for s in specs]


def _spec_from_token(token: str) -> PortSpec:
    tok = token.strip()
    if not tok:
        raise ValidationError("target_port contains an empty entry")
    port_text, _, proto = tok.partition("/")
    return PortSpec(container_port=_port_number(port_text.strip()), protocol=_protocol(proto or "TCP"))


def _spec_from_json(item: Any) -> PortSpec:
    if isinstance(item, Mapping):
        if "container_port" not in item:
            raise ValidationError("target_port entry is missing container_port")
        return PortSpec(
            container_port=_port_number(item["container_port"]),
            protocol=_protocol(item.get("protocol") or "TCP"),
        )
    return PortSpec(container_port=_port_number(item), protocol="TCP")


def _port_number(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"target_port {value!r} is not an integer")
    if isinstance(value, int):
        port = value
    elif isinstance(value, str) and value.strip().isdigit():
        port = int(value.strip())
    else:
        raise ValidationError(f"target_port {value!r} is not an integer")
    if not 1 <= port <= 65535:
        raise ValidationError(f"target_port {port} is out of range (1-65535)")
    return port


def _protocol(value: Any) -> str:
    proto = str(value).strip().upper()
    if proto not in PROTOCOLS:
        raise ValidationError(f"protocol must be TCP or UDP, got {value!r}")
    return proto


def _validate(specs: list[PortSpec]) -> list[PortSpec]:
    if not specs:
        raise ValidationError("target_port is required")
    if len(specs) > MAX_TARGET_PORTS:
        raise ValidationError(f"target_port exceeds limit (max {MAX_TARGET_PORTS})")
    seen: set[tuple[int, str]] = set()
    for spec in specs:
        key = (spec.container_port, spec.protocol)
        if key in seen:
            raise ValidationError(f"duplicate target_port entry {spec.container_port}/{spec.protocol}")
        seen.add(key)
    return specs
