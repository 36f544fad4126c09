from __future__ import annotations

import pytest

from stackdesk.application.preferences import ConnectionSettings, PreferenceStore
from stackdesk.config import PREF_API_KEY, PREF_API_KEY_ENABLED


def test_available_backend_persists_values(settings_backend) -> None:
    store = PreferenceStore(settings_backend)
    assert store.available is True

    store.set(PREF_API_KEY, "abc")
    store.set(PREF_API_KEY_ENABLED, False)

    assert settings_backend.data[PREF_API_KEY] == "abc"
    assert settings_backend.data[PREF_API_KEY_ENABLED] == "false"
    assert PreferenceStore(settings_backend).get(PREF_API_KEY) == "abc"
    assert PreferenceStore(settings_backend).get_bool(PREF_API_KEY_ENABLED, True) is False


def test_check_key_is_not_left_behind(settings_backend) -> None:
    PreferenceStore(settings_backend)
    assert settings_backend.data == {}


def test_missing_backend_falls_back_to_memory() -> None:
    store = PreferenceStore(None)
    assert store.available is False
    assert store.get("x", "d") == "d"
    store.set("x", "1")
    assert store.get("x") == "1"


def test_broken_backend_is_detected_at_construction(broken_settings_backend) -> None:
    store = PreferenceStore(broken_settings_backend)
    assert store.available is False
    store.set("k", "v")
    assert store.get("k") == "v"


def test_write_failure_flips_to_memory_mode(settings_backend) -> None:
    store = PreferenceStore(settings_backend)
    settings_backend.fail_writes = True

    store.set("k", "v")

    assert store.available is False
    assert store.get("k") == "v"


def test_connection_settings_defaults_and_effective_key(settings_backend) -> None:
    conn = ConnectionSettings(PreferenceStore(settings_backend))
    assert conn.api_key_enabled is True
    assert conn.effective_api_key() is None
    assert conn.base_url_override() is None

    conn.set_api_key("  k  ")
    assert conn.effective_api_key() == "k"
    conn.set_api_key_enabled(False)
    assert conn.effective_api_key() is None

    reloaded = ConnectionSettings(PreferenceStore(settings_backend))
    assert reloaded.api_key == "  k  "
    assert reloaded.api_key_enabled is False


def test_qsettings_ini_round_trip(tmp_path) -> None:
    pytest.importorskip("PySide6")
    from stackdesk.ui.infrastructure.settings import create_settings_backend

    path = str(tmp_path / "prefs.ini")
    store = PreferenceStore(create_settings_backend(path))
    assert store.available is True
    store.set("ui/activeTab", "create")

    assert PreferenceStore(create_settings_backend(path)).get("ui/activeTab") == "create"


def test_read_failure_falls_back_to_session_values(settings_backend) -> None:
    store = PreferenceStore(settings_backend)
    store.set(PREF_API_KEY, "abc")
    settings_backend.fail_reads = True

    assert store.get(PREF_API_KEY) == "abc"
    assert store.get("ui/activeTab", "settings") == "settings"
    assert store.get_bool(PREF_API_KEY_ENABLED, True) is True
