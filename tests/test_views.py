from __future__ import annotations

import json

STACKS = {"stacks": [{"stack_id": "s-1", "status": "running"}, {"stack_id": "s-2", "status": "failed"}]}


def test_stacks_view_rebuilds_cards_and_delete_runs_delete_item(qapp, container, session) -> None:
    from stackdesk.ui.views.stacks.view import StacksView

    view = StacksView(container)
    assert [n.objectName() for n in view.nodes] == ["placeholder"]

    session.queue(200, STACKS)
    view.refresh_button.click()
    assert [c.stack_id for c in view.card_widgets()] == ["s-1", "s-2"]

    session.queue(200, {"deleted": "s-2"})
    session.queue(200, {"stacks": []})
    view.card_widgets()[1].delete_button.click()

    assert session.methods_and_urls[-2:] == [
        ("DELETE", "http://api.test/stacks/s-2"),
        ("GET", "http://api.test/stacks"),
    ]
    assert view.card_widgets() == []
    assert [n.text() for n in view.nodes] == ["No stacks"]


def test_create_then_inspect_fields_receive_the_new_id(qapp, container, session) -> None:
    from stackdesk.ui.views.create.view import CreateView
    from stackdesk.ui.views.inspect.view import InspectView

    create = CreateView(container)
    inspect = InspectView(container)
    create.port_edit.setText("8080/tcp")

    session.queue(201, {"stack_id": "fresh"})
    create.create_button.click()

    assert json.loads(session.calls[0]["data"])["target_port"] == [{"container_port": 8080, "protocol": "TCP"}]
    assert inspect.stack_id_edit.text() == "fresh"
    assert inspect.last_stack_id_edit.text() == "fresh"
    assert inspect.last_stack_id_edit.isReadOnly()


def test_buttons_follow_busy_lock(qapp, container) -> None:
    from stackdesk.ui.views.system.view import SystemView

    view = SystemView(container)
    container.busy_lock.engage()
    assert not any(b.isEnabled() for b in view.buttons)
    container.busy_lock.release()
    assert all(b.isEnabled() for b in view.buttons)


def test_settings_view_writes_preferences(qapp, container, settings_backend) -> None:
    from stackdesk.config import PREF_API_BASE, PREF_API_KEY, PREF_API_KEY_ENABLED
    from stackdesk.ui.views.settings.view import SettingsView

    view = SettingsView(container)
    view.api_key_edit.setText("secret")
    view.api_key_enabled.setChecked(False)
    view.api_base_edit.setText("http://elsewhere:1/")
    view.api_base_edit.editingFinished.emit()

    assert settings_backend.data[PREF_API_KEY] == "secret"
    assert settings_backend.data[PREF_API_KEY_ENABLED] == "false"
    assert settings_backend.data[PREF_API_BASE] == "http://elsewhere:1/"
    assert container.pipeline.base_url() == "http://elsewhere:1"


def test_console_view_follows_records(qapp, container) -> None:
    from stackdesk.ui.components.console_view import ResponseConsoleView

    view = ResponseConsoleView(container.event_bus)
    container.console.post_error("GET /stats", RuntimeError("x"))
    assert view.state() == "error"
    assert "GET /stats (ERROR: unexpected)" in view.text()
    container.console.clear()
    assert view.text() == "ready"
    assert view.state() == "idle"


def test_tab_bar_arrow_keys_cycle(qapp, container) -> None:
    from PySide6.QtCore import Qt
    from PySide6.QtTest import QTest

    from stackdesk.config import TAB_IDS
    from stackdesk.ui.shell.tab_bar import TabBar

    bar = TabBar(container)
    container.tabs.activate(TAB_IDS[0])
    QTest.keyClick(bar.button(TAB_IDS[0]), Qt.Key.Key_Left)
    assert container.tabs.active == TAB_IDS[-1]
    assert bar.button(TAB_IDS[-1]).isChecked()
    assert not bar.button(TAB_IDS[0]).isChecked()

    bar.button(TAB_IDS[2]).click()
    assert container.tabs.active == TAB_IDS[2]
