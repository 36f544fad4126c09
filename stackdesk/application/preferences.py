"""Best-effort client-local preferences.

The store checks its backend once. If persistence works, reads and writes go to the
backend; if not (or if a later write fails), the store switches to an in-memory
map for the rest of the session. Callers never see a persistence error; they can
check :attr:`PreferenceStore.available` to know whether values survive a restart.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from stackdesk.config import PREF_API_BASE, PREF_API_KEY, PREF_API_KEY_ENABLED

log = logging.getLogger(__name__)

CHECK_KEY = "_check/writable"


class SettingsBackend(Protocol):
    """Subset of ``QSettings`` used by the store."""

    def value(self, key: str, defaultValue: Any = None) -> Any: ...

    def setValue(self, key: str, value: Any) -> None: ...

    def remove(self, key: str) -> None: ...

    def sync(self) -> None: ...


class PreferenceStore:
    def __init__(self, backend: SettingsBackend | None) -> None:
        self._backend = backend
        self._memory: dict[str, str] = {}
        self._available = self._check_backend()
        if not self._available:
            log.warning("Preference storage unavailable; preferences will not persist")

    @property
    def available(self) -> bool:
        return self._available

    def get(self, key: str, default: str | None = None) -> str | None:
        if not self._available:
            return self._memory.get(key, default)
        try:
            value = self._backend.value(key, None)  # type: ignore[union-attr]
        except Exception:
            log.warning("Reading preference %r failed", key, exc_info=True)
            return self._memory.get(key, default)
        if value is None:
            return default
        return str(value)

    def get_bool(self, key: str, default: bool) -> bool:
        value = self.get(key)
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def set(self, key: str, value: str | bool) -> None:
        text = ("true" if value else "false") if isinstance(value, bool) else str(value)
        self._memory[key] = text
        if not self._available:
            return
        try:
            self._backend.setValue(key, text)  # type: ignore[union-attr]
            self._backend.sync()  # type: ignore[union-attr]
        except Exception:
            log.warning("Writing preference %r failed; switching to in-memory mode", key, exc_info=True)
            self._available = False

    def _check_backend(self) -> bool:
        backend = self._backend
        if backend is None:
            return False
        try:
            backend.setValue(CHECK_KEY, "1")
            backend.sync()
            readable = str(backend.value(CHECK_KEY, "")) == "1"
            backend.remove(CHECK_KEY)
            backend.sync()
        except Exception:
            log.debug("Preference backend check failed", exc_info=True)
            return False
        return readable and _status_ok(backend)


class ConnectionSettings:
    """API base override and API key, cached in memory.

    The request pipeline reads these from the worker thread, so the values are
    plain attributes loaded once and updated on every change.
    """

    def __init__(self, store: PreferenceStore) -> None:
        self._store = store
        self.api_base = store.get(PREF_API_BASE, "") or ""
        self.api_key = store.get(PREF_API_KEY, "") or ""
        self.api_key_enabled = store.get_bool(PREF_API_KEY_ENABLED, True)

    def set_api_base(self, value: str) -> None:
        self.api_base = value.strip()
        self._store.set(PREF_API_BASE, self.api_base)

    def set_api_key(self, value: str) -> None:
        self.api_key = value
        self._store.set(PREF_API_KEY, value)

    def set_api_key_enabled(self, enabled: bool) -> None:
        self.api_key_enabled = enabled
        self._store.set(PREF_API_KEY_ENABLED, enabled)

    def base_url_override(self) -> str | None:
        return self.api_base or None

    def effective_api_key(self) -> str | None:
        """Key to send, or None when the toggle is off or the key is blank."""
        if not self.api_key_enabled:
            return None
        key = self.api_key.strip()
        return key or None


def _status_ok(backend: Any) -> bool:
    status = getattr(backend, "status", None)
    if not callable(status):
        return True
    code = status()
    return getattr(code, "value", code) == 0
