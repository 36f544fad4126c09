"""Stack list: full-replace rendering of the latest ``GET /stacks`` result into cards."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from stackdesk.application.state import PanelState
from stackdesk.domain.formatting import (
    format_bytes,
    format_cpu_milli,
    format_ports,
    format_timestamp,
    format_value,
)
from stackdesk.domain.models import StackSummary

PLACEHOLDER_TEXT = "No stacks"
DELETE_ITEM_ACTION = "delete_item"


@dataclass(frozen=True, slots=True)
class StackCard:
    stack_id: str
    title: str
    status: str
    fields: tuple[tuple[str, str], ...]
    delete_action: str = DELETE_ITEM_ACTION

    def field(self, label: str) -> str:
        for name, value in self.fields:
            if name == label:
                return value
        raise KeyError(label)


@dataclass(frozen=True, slots=True)
class StackListSnapshot:
    cards: tuple[StackCard, ...]
    placeholder: str | None = None

    @property
    def node_count(self) -> int:
        """Rendered nodes: one per card, or the single placeholder."""
        return len(self.cards) if self.cards else 1


def build_card(stack: StackSummary) -> StackCard:
    return StackCard(
        stack_id=stack.stack_id,
        title=format_value(stack.stack_id),
        status=format_value(stack.status),
        fields=(
            ("Namespace", format_value(stack.namespace)),
            ("Pod", format_value(stack.pod_id)),
            ("Service", format_value(stack.service_name)),
            ("Node", format_value(stack.node_id)),
            ("Public IP", format_value(stack.node_public_ip)),
            ("Ports", format_ports(stack.ports)),
            ("CPU", format_cpu_milli(stack.requested_cpu_milli)),
            ("Memory", format_bytes(stack.requested_memory_bytes)),
            ("TTL", format_timestamp(stack.ttl_expires_at)),
            ("Created", format_timestamp(stack.created_at)),
            ("Updated", format_timestamp(stack.updated_at)),
        ),
    )


class StackListView:
    def __init__(self, state: PanelState) -> None:
        self._state = state

    @property
    def snapshot(self) -> StackListSnapshot | None:
        return self._state.stack_list

    def render(self, stacks: Sequence[StackSummary]) -> StackListSnapshot:
        cards = tuple(build_card(s) for s in stacks)
        snapshot = StackListSnapshot(cards=cards, placeholder=None if cards else PLACEHOLDER_TEXT)
        self._state.set_stack_list(snapshot)
        return snapshot
