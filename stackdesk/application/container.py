"""Composition root / DI container.

The UI never builds application services itself; it asks the container. Qt-specific
collaborators (settings backend, executor that hops back to the UI thread) are
passed in by the shell so this module stays importable without a display.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from stackdesk.application.actions import build_action_table
from stackdesk.application.busy_lock import BusyLock
from stackdesk.application.console import ResponseConsole
from stackdesk.application.dispatcher import ActionDispatcher
from stackdesk.application.executor import ActionExecutor, InlineExecutor
from stackdesk.application.preferences import ConnectionSettings, PreferenceStore, SettingsBackend
from stackdesk.application.stack_list import StackListView
from stackdesk.application.state import PanelState
from stackdesk.application.tabs import TabController
from stackdesk.config import DEFAULT_API_BASE, TARGET_PORT_ENCODING
from stackdesk.core.events import EventBus
from stackdesk.domain.target_ports import check_encoding
from stackdesk.services.request_pipeline import RequestPipeline

if TYPE_CHECKING:
    from stackdesk.ui.infrastructure.notifications import NotificationCenter


class Container:
    """Resolves application services lazily. Single place to swap implementations."""

    def __init__(
        self,
        settings_backend: SettingsBackend | None = None,
        executor: ActionExecutor | None = None,
        session: requests.Session | None = None,
        default_api_base: str = DEFAULT_API_BASE,
        target_port_encoding: str = TARGET_PORT_ENCODING,
    ) -> None:
        self._settings_backend = settings_backend
        self._executor = executor
        self._session = session
        self._default_api_base = default_api_base
        self._target_port_encoding = check_encoding(target_port_encoding)
        self._event_bus: EventBus | None = None
        self._preferences: PreferenceStore | None = None
        self._connection: ConnectionSettings | None = None
        self._state: PanelState | None = None
        self._pipeline: RequestPipeline | None = None
        self._busy_lock: BusyLock | None = None
        self._console: ResponseConsole | None = None
        self._stack_list: StackListView | None = None
        self._tabs: TabController | None = None
        self._dispatcher: ActionDispatcher | None = None
        self.notifications: NotificationCenter | None = None

    @property
    def event_bus(self) -> EventBus:
        if self._event_bus is None:
            self._event_bus = EventBus()
        return self._event_bus

    @property
    def preferences(self) -> PreferenceStore:
        if self._preferences is None:
            self._preferences = PreferenceStore(self._settings_backend)
        return self._preferences

    @property
    def connection(self) -> ConnectionSettings:
        if self._connection is None:
            self._connection = ConnectionSettings(self.preferences)
        return self._connection

    @property
    def state(self) -> PanelState:
        if self._state is None:
            self._state = PanelState(self.event_bus)
        return self._state

    @property
    def pipeline(self) -> RequestPipeline:
        if self._pipeline is None:
            conn = self.connection
            self._pipeline = RequestPipeline(
                conn.base_url_override,
                conn.effective_api_key,
                default_base=self._default_api_base,
                session=self._session,
            )
        return self._pipeline

    @property
    def busy_lock(self) -> BusyLock:
        if self._busy_lock is None:
            self._busy_lock = BusyLock(self.state)
        return self._busy_lock

    @property
    def console(self) -> ResponseConsole:
        if self._console is None:
            self._console = ResponseConsole(self.state)
        return self._console

    @property
    def stack_list(self) -> StackListView:
        if self._stack_list is None:
            self._stack_list = StackListView(self.state)
        return self._stack_list

    @property
    def tabs(self) -> TabController:
        if self._tabs is None:
            self._tabs = TabController(self.state, self.preferences)
        return self._tabs

    @property
    def dispatcher(self) -> ActionDispatcher:
        if self._dispatcher is None:
            self._dispatcher = ActionDispatcher(
                build_action_table(self._target_port_encoding),
                self.pipeline,
                self.state,
                self.console,
                self.stack_list,
                self.busy_lock,
                executor=self._executor or InlineExecutor(),
            )
        return self._dispatcher
