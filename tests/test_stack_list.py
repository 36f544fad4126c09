from __future__ import annotations

from stackdesk.application.stack_list import PLACEHOLDER_TEXT, StackListView
from stackdesk.application.state import PanelState
from stackdesk.core.events import EventBus, StacksRendered
from stackdesk.domain.models import StackSummary, parse_stack_list

BODY = {
    "stacks": [
        {
            "stack_id": "s-1",
            "namespace": "stack-s-1",
            "pod_id": "pod-1",
            "service_name": "svc-1",
            "node_id": "node-a",
            "node_public_ip": "203.0.113.7",
            "ports": [{"container_port": 80, "protocol": "TCP", "node_port": 31001}],
            "ttl_expires_at": "2024-05-01T13:00:00Z",
            "created_at": "2024-05-01T12:00:00Z",
            "updated_at": None,
            "requested_cpu_milli": 500,
            "requested_memory_bytes": 268435456,
            "status": "running",
        },
        {"stack_id": "s-2"},
    ]
}


def test_empty_render_shows_single_placeholder() -> None:
    view = StackListView(PanelState(EventBus()))
    snap = view.render([])
    assert snap.cards == ()
    assert snap.placeholder == PLACEHOLDER_TEXT
    assert snap.node_count == 1


def test_cards_follow_input_order_and_format_fields() -> None:
    view = StackListView(PanelState(EventBus()))
    snap = view.render(parse_stack_list(BODY))

    assert [c.stack_id for c in snap.cards] == ["s-1", "s-2"]
    assert snap.placeholder is None
    first, second = snap.cards
    assert first.status == "running"
    assert first.field("Ports") == "80/TCP→31001"
    assert first.field("CPU") == "500m"
    assert first.field("Memory") == "256.0 MB"
    assert first.field("Created") == "2024-05-01T12:00:00.000Z"
    assert first.field("Updated") == "-"
    assert first.delete_action == "delete_item"
    assert second.status == "-"
    assert second.field("Namespace") == "-"


def test_render_replaces_previous_content_and_notifies() -> None:
    bus = EventBus()
    rendered: list[int] = []
    bus.subscribe(StacksRendered, lambda e: rendered.append(e.snapshot.node_count))
    view = StackListView(PanelState(bus))

    view.render([StackSummary("a"), StackSummary("b"), StackSummary("c")])
    view.render([StackSummary("d")])

    assert [c.stack_id for c in view.snapshot.cards] == ["d"]
    assert rendered == [3, 1]


def test_parse_stack_list_is_lenient() -> None:
    assert parse_stack_list("oops") == []
    assert parse_stack_list({"stacks": None}) == []
    assert [s.stack_id for s in parse_stack_list({"stacks": [{"stack_id": "x"}, "junk"]})] == ["x"]
    summary = parse_stack_list({"stacks": [{"stack_id": "x", "requested_cpu_milli": "n/a"}]})[0]
    assert summary.requested_cpu_milli is None
