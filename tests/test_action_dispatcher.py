from __future__ import annotations

import json

import pytest

from stackdesk.application.container import Container
from stackdesk.core.errors import UnknownActionError
from stackdesk.core.events import ActionFinished

STACK = {"stack_id": "s-9", "status": "running", "requested_memory_bytes": 512}


class _Control:
    def __init__(self) -> None:
        self.enabled = True

    def setEnabled(self, enabled: bool) -> None:
        self.enabled = enabled


class _DeferredExecutor:
    """Holds submitted work until the test completes it."""

    def __init__(self) -> None:
        self.pending = []

    def submit(self, work, on_done) -> None:
        self.pending.append((work, on_done))

    def complete_all(self) -> None:
        from stackdesk.application.executor import run_captured

        while self.pending:
            work, on_done = self.pending.pop(0)
            on_done(run_captured(work))


def _finished(container) -> list[ActionFinished]:
    events: list[ActionFinished] = []
    container.event_bus.subscribe(ActionFinished, events.append)
    return events


def test_health_posts_ok_record_and_releases_lock(container, session) -> None:
    finished = _finished(container)
    session.queue(200, {"status": "ok"})

    assert container.dispatcher.run_action("health") is True

    record = container.console.last
    assert record.title == "GET /healthz"
    assert record.state == "ok"
    assert json.loads(record.body)["body"] == {"status": "ok"}
    assert container.busy_lock.engaged is False
    assert finished == [ActionFinished("health", ok=True, error_kind=None)]


def test_list_stacks_renders_cards(container, session) -> None:
    session.queue(200, {"stacks": [STACK]})
    container.dispatcher.run_action("list_stacks")
    assert [c.stack_id for c in container.state.stack_list.cards] == ["s-9"]


def test_refresh_with_empty_collection_shows_placeholder(container, session) -> None:
    session.queue(200, {"stacks": []})
    container.dispatcher.run_action("refresh_list")
    assert container.state.stack_list.node_count == 1
    assert container.state.stack_list.placeholder == "No stacks"


def test_delete_item_deletes_then_lists_and_renders_the_list(container, session) -> None:
    session.queue(200, {"deleted": "s-1"})
    session.queue(200, {"stacks": [STACK]})

    container.dispatcher.run_action("delete_item", stack_id="s-1")

    assert session.methods_and_urls == [
        ("DELETE", "http://api.test/stacks/s-1"),
        ("GET", "http://api.test/stacks"),
    ]
    assert [c.stack_id for c in container.state.stack_list.cards] == ["s-9"]
    body = json.loads(container.console.last.body)
    assert body["deleted"]["body"] == {"deleted": "s-1"}
    assert body["refreshed"]["status"] == 200
    assert container.console.last.state == "ok"


def test_delete_item_refreshes_even_when_delete_fails(container, session) -> None:
    finished = _finished(container)
    session.queue(404, {"error": "not found"})
    session.queue(200, {"stacks": []})

    container.dispatcher.run_action("delete_item", stack_id="gone")

    assert [m for m, _ in session.methods_and_urls] == ["DELETE", "GET"]
    assert container.state.stack_list.placeholder == "No stacks"
    record = container.console.last
    assert record.state == "error"
    assert record.title.endswith("(ERROR: response)")
    assert json.loads(record.body)["body"] == {"error": "not found"}
    assert finished[-1].error_kind == "response"
    assert container.busy_lock.engaged is False


def test_create_posts_body_and_propagates_stack_id(container, session) -> None:
    session.queue(201, {"stack_id": "new-1", "status": "creating"})

    container.dispatcher.run_action("create")

    call = session.calls[0]
    assert (call["method"], call["url"]) == ("POST", "http://api.test/stacks")
    sent = json.loads(call["data"])
    assert sent["target_port"] == [{"container_port": 80, "protocol": "TCP"}]
    assert sent["pod_spec"].startswith("apiVersion: v1")
    assert container.state.form.stack_id == "new-1"
    assert container.state.form.last_stack_id == "new-1"
    assert container.console.last.state == "ok"


def test_create_with_int_encoding(session, settings_backend) -> None:
    container = Container(
        settings_backend=settings_backend,
        session=session,
        default_api_base="http://api.test",
        target_port_encoding="int",
    )
    session.queue(201, {"stack_id": "n"})
    container.dispatcher.run_action("create")
    assert json.loads(session.calls[0]["data"])["target_port"] == 80


@pytest.mark.parametrize(
    ("form", "action_id"),
    [
        ({"target_port": "http"}, "create"),
        ({"target_port": "99999"}, "create"),
        ({"pod_spec": "- not\n- a mapping\n"}, "create"),
        ({"stack_id": "   "}, "get_stack"),
        ({"stack_id": ""}, "delete_stack"),
    ],
)
def test_validation_failures_never_reach_the_network(container, session, form, action_id) -> None:
    container.state.update_form(**form)
    finished = _finished(container)

    container.dispatcher.run_action(action_id)

    assert session.calls == []
    assert container.console.last.title.endswith("(ERROR: validation)")
    assert container.busy_lock.engaged is False
    assert finished[-1].error_kind == "validation"


def test_single_stack_actions_quote_the_id(container, session) -> None:
    container.state.update_form(stack_id="a/b")
    session.queue(200, {})
    session.queue(200, {})
    container.dispatcher.run_action("get_stack")
    container.dispatcher.run_action("get_status")
    assert [u for _, u in session.methods_and_urls] == [
        "http://api.test/stacks/a%2Fb",
        "http://api.test/stacks/a%2Fb/status",
    ]


def test_transport_failure_is_reported_and_lock_released(container, session) -> None:
    session.queue_error()
    container.dispatcher.run_action("stats")
    assert container.console.last.title == "GET /stats (ERROR: transport)"
    assert container.busy_lock.engaged is False


def test_failure_while_routing_still_releases_lock(container, session, monkeypatch) -> None:
    def _boom(_stacks):
        raise RuntimeError("render failed")

    monkeypatch.setattr(container.stack_list, "render", _boom)
    finished = _finished(container)
    session.queue(200, {"stacks": []})

    container.dispatcher.run_action("list_stacks")

    assert container.busy_lock.engaged is False
    assert container.console.last.title == "GET /stacks (ERROR: unexpected)"
    assert finished[-1].error_kind == "unexpected"


def test_controls_disabled_while_in_flight_and_second_action_refused(session, settings_backend) -> None:
    executor = _DeferredExecutor()
    container = Container(
        settings_backend=settings_backend, executor=executor, session=session, default_api_base="http://api.test"
    )
    control = _Control()
    container.busy_lock.register(control)
    session.queue(200, {"status": "ok"})

    assert container.dispatcher.run_action("health") is True
    assert control.enabled is False
    assert json.loads(container.console.last.body) == {"status": "running"}
    assert container.dispatcher.run_action("stats") is False
    assert len(executor.pending) == 1

    executor.complete_all()

    assert control.enabled is True
    assert session.methods_and_urls == [("GET", "http://api.test/healthz")]
    assert container.console.last.state == "ok"


def test_unknown_action_raises_before_locking(container) -> None:
    with pytest.raises(UnknownActionError):
        container.dispatcher.run_action("reboot")
    assert container.busy_lock.engaged is False
    assert container.console.last is None


def test_clear_console_is_local_and_works_while_busy(container) -> None:
    container.console.post("x", {"a": 1})
    container.busy_lock.engage()

    assert container.dispatcher.run_action("clear_console") is True

    assert container.console.last.render() == "ready"
    assert container.busy_lock.engaged is True


def test_action_table_ids() -> None:
    from stackdesk.application.actions import build_action_table

    assert set(build_action_table()) == {
        "health",
        "list_stacks",
        "stats",
        "get_stack",
        "get_status",
        "delete_stack",
        "refresh_list",
        "delete_item",
        "create",
        "clear_console",
    }


def test_handlers_send_action_requests_through_the_pipeline(container, session, monkeypatch) -> None:
    from stackdesk.domain.models import ActionRequest

    sent: list[ActionRequest] = []
    send = container.pipeline.send

    def _recording_send(req: ActionRequest):
        sent.append(req)
        return send(req)

    monkeypatch.setattr(container.pipeline, "send", _recording_send)
    session.queue(200, {})
    session.queue(200, {"stacks": []})

    container.dispatcher.run_action("delete_item", stack_id="s-1")

    assert sent == [ActionRequest("DELETE", "/stacks/s-1"), ActionRequest("GET", "/stacks")]


def test_unknown_target_port_encoding_is_rejected_at_startup(session) -> None:
    from stackdesk.core.errors import ValidationError

    with pytest.raises(ValidationError, match="encoding"):
        Container(session=session, target_port_encoding="csv")
    assert session.calls == []
