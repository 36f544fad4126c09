from __future__ import annotations

import pytest

from stackdesk.core.errors import ValidationError
from stackdesk.domain.create_request import build_create_body, validate_pod_spec
from stackdesk.domain.models import PortSpec
from stackdesk.domain.target_ports import ENCODING_INT, ENCODING_LIST, encode_target_port, parse_target_ports

POD = "apiVersion: v1\nkind: Pod\nmetadata:\n  name: x\n"


def test_single_port_defaults_to_tcp() -> None:
    assert parse_target_ports("80") == [PortSpec(80, "TCP")]
    assert parse_target_ports(" 53/udp ") == [PortSpec(53, "UDP")]


def test_comma_list_and_json_arrays() -> None:
    assert parse_target_ports("80, 443/tcp") == [PortSpec(80), PortSpec(443)]
    assert parse_target_ports("[80, 443]") == [PortSpec(80), PortSpec(443)]
    assert parse_target_ports('[{"container_port": 8080, "protocol": "udp"}]') == [PortSpec(8080, "UDP")]


@pytest.mark.parametrize(
    "text",
    ["", "   ", "0", "65536", "http", "80/sctp", "80,,81", "80, 80", "[80", '{"a": 1}', "[true]", '[{"protocol": "TCP"}]'],
)
def test_rejects_malformed_input(text: str) -> None:
    with pytest.raises(ValidationError):
        parse_target_ports(text)


def test_limit_on_number_of_ports() -> None:
    assert len(parse_target_ports(",".join(str(p) for p in range(1000, 1024)))) == 24
    with pytest.raises(ValidationError):
        parse_target_ports(",".join(str(p) for p in range(1000, 1025)))


def test_same_port_with_different_protocols_is_allowed() -> None:
    assert parse_target_ports("53, 53/udp") == [PortSpec(53, "TCP"), PortSpec(53, "UDP")]


def test_encodings() -> None:
    specs = [PortSpec(80)]
    assert encode_target_port(specs, ENCODING_LIST) == [{"container_port": 80, "protocol": "TCP"}]
    assert encode_target_port(specs, ENCODING_INT) == 80
    with pytest.raises(ValidationError):
        encode_target_port([PortSpec(80), PortSpec(81)], ENCODING_INT)
    with pytest.raises(ValidationError):
        encode_target_port([PortSpec(53, "UDP")], ENCODING_INT)
    with pytest.raises(ValidationError):
        encode_target_port(specs, "csv")


def test_pod_spec_must_be_a_yaml_mapping() -> None:
    assert validate_pod_spec(POD) == POD
    for bad in ("", "  \n", "- a\n- b\n", "key: [unclosed", "just text"):
        with pytest.raises(ValidationError):
            validate_pod_spec(bad)


def test_build_create_body() -> None:
    body = build_create_body("80", POD)
    assert body == {"target_port": [{"container_port": 80, "protocol": "TCP"}], "pod_spec": POD}
    assert build_create_body("80", POD, ENCODING_INT)["target_port"] == 80
