"""Domain values and pure helpers (no Qt, no network)."""

from stackdesk.domain.models import (
    ActionRequest,
    PortMapping,
    PortSpec,
    ResponsePayload,
    StackSummary,
    parse_stack_list,
)

__all__ = [
    "ActionRequest",
    "PortMapping",
    "PortSpec",
    "ResponsePayload",
    "StackSummary",
    "parse_stack_list",
]
