"""Request body for ``POST /stacks``, validated before it leaves the client."""

from __future__ import annotations

from typing import Any

import yaml

from stackdesk.core.errors import ValidationError
from stackdesk.domain.target_ports import ENCODING_LIST, encode_target_port, parse_target_ports


def validate_pod_spec(text: str) -> str:
    """Require a YAML mapping; the server does the Kubernetes-level checks."""
    if not (text or "").strip():
        raise ValidationError("pod_spec is required")
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValidationError(f"pod_spec is not valid YAML: {exc}", exc) from exc
    if not isinstance(doc, dict):
        raise ValidationError("pod_spec must be a YAML mapping")
    return text


def build_create_body(port_text: str, pod_spec: str, encoding: str = ENCODING_LIST) -> dict[str, Any]:
    specs = parse_target_ports(port_text)
    return {
        "target_port": encode_target_port(specs, encoding),
        "pod_spec": validate_pod_spec(pod_spec),
    }
