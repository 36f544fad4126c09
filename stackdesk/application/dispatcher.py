"""Action dispatcher: resolves an action id and runs it under the busy lock."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from stackdesk.application.actions import ActionResult, ActionSpec
from stackdesk.application.busy_lock import BusyLock
from stackdesk.application.console import ResponseConsole
from stackdesk.application.executor import ActionExecutor, InlineExecutor, Outcome
from stackdesk.application.stack_list import StackListView
from stackdesk.application.state import PanelState
from stackdesk.core.errors import AppError, UnknownActionError
from stackdesk.core.events import ActionFinished
from stackdesk.services.request_pipeline import RequestPipeline

log = logging.getLogger(__name__)


class ActionDispatcher:
    """Runs registered actions one at a time.

    Lifecycle per action: engage the busy lock, post a "running" record, run the
    handler on the executor, route the result (console, stack list, stack id),
    release the lock. The release happens on every path, including failures in
    the routing itself.
    """

    def __init__(
        self,
        table: Mapping[str, ActionSpec],
        pipeline: RequestPipeline,
        state: PanelState,
        console: ResponseConsole,
        stack_list: StackListView,
        busy: BusyLock,
        executor: ActionExecutor | None = None,
    ) -> None:
        self._table = dict(table)
        self._pipeline = pipeline
        self._state = state
        self._console = console
        self._stack_list = stack_list
        self._busy = busy
        self._executor = executor or InlineExecutor()
        self._local_actions = {"clear_console": console.clear}

    @property
    def executor(self) -> ActionExecutor:
        return self._executor

    @property
    def action_ids(self) -> tuple[str, ...]:
        return tuple(self._table)

    def spec(self, action_id: str) -> ActionSpec:
        try:
            return self._table[action_id]
        except KeyError:
            raise UnknownActionError(f"unknown action {action_id!r}") from None

    def run_action(self, action_id: str, **params: Any) -> bool:
        """Start an action. Returns False if another action is still in flight."""
        spec = self.spec(action_id)
        if spec.local:
            self._run_local(spec)
            return True
        if self._busy.engaged:
            log.warning("Ignoring %s: another action is in flight", action_id)
            return False

        log.info("Running action %s", action_id)
        self._busy.engage()
        try:
            self._console.post_running(spec.title)
            inputs = self._state.snapshot_inputs(params)
            handler = spec.handler
            if handler is None:
                raise UnknownActionError(f"action {action_id!r} has no handler")
            self._executor.submit(partial(handler, self._pipeline, inputs), partial(self._complete, spec))
        except BaseException:
            self._busy.release()
            raise
        return True

    def _run_local(self, spec: ActionSpec) -> None:
        run = self._local_actions.get(spec.action_id)
        if run is not None:
            run()
            return
        raise UnknownActionError(f"no local behaviour for {spec.action_id!r}")

    def _complete(self, spec: ActionSpec, outcome: Outcome) -> None:
        error_kind: str | None = None
        try:
            if outcome.error is not None:
                error_kind = self._fail(spec, outcome.error)
                return
            result: ActionResult = outcome.result
            if result.stacks is not None:
                self._stack_list.render(result.stacks)
            if result.stack_id:
                self._state.propagate_stack_id(result.stack_id)
            if result.error is not None:
                error_kind = self._fail(spec, result.error)
            else:
                self._console.post(spec.title, result.payload)
        except Exception as exc:
            log.exception("Routing the result of %s failed", spec.action_id)
            error_kind = self._fail(spec, exc)
        finally:
            self._busy.release()
            self._state.bus.publish(ActionFinished(spec.action_id, ok=error_kind is None, error_kind=error_kind))

    def _fail(self, spec: ActionSpec, exc: BaseException) -> str:
        if not isinstance(exc, AppError):
            log.error("Action %s raised unexpectedly", spec.action_id, exc_info=exc)
        self._console.post_error(spec.title, exc)
        return exc.kind if isinstance(exc, AppError) else "unexpected"
