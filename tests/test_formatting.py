from __future__ import annotations

import pytest

from stackdesk.domain.formatting import (
    EMPTY,
    format_bytes,
    format_cpu_milli,
    format_ports,
    format_timestamp,
    format_value,
)
from stackdesk.domain.models import PortMapping


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0 B"),
        (512, "512 B"),
        (1536, "1.5 KB"),
        (2097152, "2.0 MB"),
        (1073741824, "1.00 GB"),
        (None, EMPTY),
    ],
)
def test_format_bytes(value, expected) -> None:
    assert format_bytes(value) == expected


def test_format_timestamp_absent_or_unparseable() -> None:
    assert format_timestamp(None) == EMPTY
    assert format_timestamp("") == EMPTY
    assert format_timestamp("yesterday-ish") == "yesterday-ish"
    assert format_timestamp("2024-13-01T12:00:00Z") == "2024-13-01T12:00:00Z"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-05-01T12:00:00Z", "2024-05-01T12:00:00.000Z"),
        ("2024-05-01T12:00:00.5Z", "2024-05-01T12:00:00.500Z"),
        ("2024-05-01T12:00:00.123456789Z", "2024-05-01T12:00:00.123Z"),
        ("2024-05-01T14:00:00+02:00", "2024-05-01T12:00:00.000Z"),
        ("2024-05-01T07:30:00.25-04:30", "2024-05-01T12:00:00.250Z"),
        ("2024-05-01T12:00:00", "2024-05-01T12:00:00.000Z"),
    ],
)
def test_format_timestamp_normalizes_to_utc(value, expected) -> None:
    assert format_timestamp(value) == expected


def test_format_cpu_and_value() -> None:
    assert format_cpu_milli(250) == "250m"
    assert format_cpu_milli(None) == EMPTY
    assert format_value("  ") == EMPTY
    assert format_value("ns-1") == "ns-1"


def test_format_ports() -> None:
    ports = (PortMapping(80, "TCP", 31001), PortMapping(53, "UDP", None))
    assert format_ports(ports) == "80/TCP→31001, 53/UDP→-"
    assert format_ports(None) == EMPTY
    assert format_ports(()) == EMPTY
