"""Pure display formatters for stack card fields."""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from stackdesk.domain.models import PortMapping

EMPTY = "-"

_KB = 1024
_MB = 1024**2
_GB = 1024**3

# RFC 3339 as the server writes it (Go RFC3339Nano): up to 9 fractional digits, trailing zeros trimmed.
_RFC3339 = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2})(?:\.(\d{1,9}))?([Zz]|[+-]\d{2}:\d{2})?$"
)


def format_value(value: Any) -> str:
    if value is None:
        return EMPTY
    text = str(value).strip()
    return text or EMPTY


def format_timestamp(value: str | None) -> str:
    """UTC ISO-8601 with millisecond precision (``2024-05-01T12:00:00.500Z``).

    Values without an offset are taken as UTC. Anything unparseable is returned as is.
    """
    if value is None or not str(value).strip():
        return EMPTY
    raw = str(value).strip()
    match = _RFC3339.match(raw)
    if match is None:
        return raw
    date, clock, fraction, offset = match.groups()
    micros = (fraction or "")[:6].ljust(6, "0")
    if offset is None or offset in ("Z", "z"):
        offset = "+00:00"
    try:
        parsed = datetime.fromisoformat(f"{date}T{clock}.{micros}{offset}")
    except ValueError:
        return raw
    utc = parsed.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_bytes(value: int | None) -> str:
    if value is None:
        return EMPTY
    n = int(value)
    if n < _KB:
        return f"{n} B"
    if n < _MB:
        return f"{n / _KB:.1f} KB"
    if n < _GB:
        return f"{n / _MB:.1f} MB"
    return f"{n / _GB:.2f} GB"


def format_cpu_milli(value: int | None) -> str:
    if value is None:
        return EMPTY
    return f"{int(value)}m"


def format_ports(ports: Sequence[PortMapping] | None) -> str:
    if not ports:
        return EMPTY
    parts = []
    for p in ports:
        container = format_value(p.container_port)
        proto = format_value(p.protocol)
        node = format_value(p.node_port)
        parts.append(f"{container}/{proto}→{node}")
    return ", ".join(parts)
