"""Tab controller: exactly one active panel, keyboard cycling, persisted choice."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from stackdesk.application.preferences import PreferenceStore
from stackdesk.application.state import PanelState
from stackdesk.config import DEFAULT_TAB, PREF_ACTIVE_TAB, TAB_IDS

log = logging.getLogger(__name__)


class TabController:
    def __init__(
        self,
        state: PanelState,
        preferences: PreferenceStore,
        tab_ids: Sequence[str] = TAB_IDS,
        default_tab: str = DEFAULT_TAB,
    ) -> None:
        if default_tab not in tab_ids:
            raise ValueError(f"default tab {default_tab!r} is not one of {tuple(tab_ids)}")
        self._state = state
        self._prefs = preferences
        self._tab_ids = tuple(tab_ids)
        self._default = default_tab

    @property
    def tab_ids(self) -> tuple[str, ...]:
        return self._tab_ids

    @property
    def active(self) -> str:
        return self._state.active_tab

    def restore(self) -> str:
        """Activate the persisted tab, or the default one when nothing usable is stored."""
        saved = self._prefs.get(PREF_ACTIVE_TAB)
        tab_id = saved if saved in self._tab_ids else self._default
        self.activate(tab_id)
        return tab_id

    def activate(self, tab_id: str) -> bool:
        if tab_id not in self._tab_ids:
            log.debug("Ignoring unknown tab %r", tab_id)
            return False
        self._state.set_active_tab(tab_id)
        self._prefs.set(PREF_ACTIVE_TAB, tab_id)
        return True

    def is_active(self, tab_id: str) -> bool:
        return self._state.active_tab == tab_id

    def markers(self) -> dict[str, bool]:
        return {tab_id: self.is_active(tab_id) for tab_id in self._tab_ids}

    def cycle(self, step: int, from_tab: str | None = None) -> str:
        """Move ``step`` tabs from the focused one (or the active one), wrapping at both ends."""
        current = from_tab if from_tab is not None else self._state.active_tab
        idx = self._tab_ids.index(current) if current in self._tab_ids else 0
        target = self._tab_ids[(idx + step) % len(self._tab_ids)]
        self.activate(target)
        return target
