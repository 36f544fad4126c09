"""Dispatch table: action id -> call sequence.

Handlers run off the UI thread. They receive the pipeline and an immutable
snapshot of the form, validate locally, issue their calls in strict order and
return an :class:`ActionResult` for the dispatcher to route.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from stackdesk.application.state import ActionInputs
from stackdesk.config import TARGET_PORT_ENCODING
from stackdesk.core.errors import AppError, ResponseError, TransportError, ValidationError
from stackdesk.domain.create_request import build_create_body
from stackdesk.domain.models import ActionRequest, StackSummary, parse_stack_list
from stackdesk.services.request_pipeline import RequestPipeline

STACKS_PATH = "/stacks"


@dataclass(frozen=True, slots=True)
class ActionResult:
    payload: Any
    stacks: list[StackSummary] | None = None
    stack_id: str | None = None
    error: AppError | None = None  # failure of an earlier step in a composite action


Handler = Callable[[RequestPipeline, ActionInputs], ActionResult]


@dataclass(frozen=True, slots=True)
class ActionSpec:
    action_id: str
    title: str
    handler: Handler | None = None
    local: bool = False


def stack_path(stack_id: str, suffix: str = "") -> str:
    return f"{STACKS_PATH}/{quote(stack_id, safe='')}{suffix}"


def require_stack_id(value: Any) -> str:
    stack_id = str(value or "").strip()
    if not stack_id:
        raise ValidationError("stack_id is required")
    return stack_id


def _get(path: str) -> Handler:
    def handler(pipeline: RequestPipeline, _inputs: ActionInputs) -> ActionResult:
        return ActionResult(payload=pipeline.send(ActionRequest("GET", path)))

    return handler


def _list_stacks(pipeline: RequestPipeline, _inputs: ActionInputs) -> ActionResult:
    payload = pipeline.send(ActionRequest("GET", STACKS_PATH))
    return ActionResult(payload=payload, stacks=parse_stack_list(payload.body))


def _get_stack(pipeline: RequestPipeline, inputs: ActionInputs) -> ActionResult:
    stack_id = require_stack_id(inputs.stack_id)
    return ActionResult(payload=pipeline.send(ActionRequest("GET", stack_path(stack_id))))


def _get_status(pipeline: RequestPipeline, inputs: ActionInputs) -> ActionResult:
    stack_id = require_stack_id(inputs.stack_id)
    return ActionResult(payload=pipeline.send(ActionRequest("GET", stack_path(stack_id, "/status"))))


def _delete_stack(pipeline: RequestPipeline, inputs: ActionInputs) -> ActionResult:
    stack_id = require_stack_id(inputs.stack_id)
    return ActionResult(payload=pipeline.send(ActionRequest("DELETE", stack_path(stack_id))))


def _delete_item(pipeline: RequestPipeline, inputs: ActionInputs) -> ActionResult:
    """DELETE the card's stack, then always re-fetch the collection."""
    stack_id = require_stack_id(inputs.params.get("stack_id"))
    deleted: dict[str, Any] | None = None
    delete_error: AppError | None = None
    try:
        deleted = pipeline.send(ActionRequest("DELETE", stack_path(stack_id))).to_dict()
    except (ResponseError, TransportError) as exc:
        delete_error = exc
    listed = pipeline.send(ActionRequest("GET", STACKS_PATH))
    return ActionResult(
        payload={"deleted": deleted, "refreshed": listed.to_dict()},
        stacks=parse_stack_list(listed.body),
        error=delete_error,
    )


def _create(encoding: str) -> Handler:
    def handler(pipeline: RequestPipeline, inputs: ActionInputs) -> ActionResult:
        body = build_create_body(inputs.target_port, inputs.pod_spec, encoding)
        payload = pipeline.send(ActionRequest("POST", STACKS_PATH, body))
        stack_id = payload.body.get("stack_id") if isinstance(payload.body, Mapping) else None
        return ActionResult(payload=payload, stack_id=str(stack_id) if stack_id else None)

    return handler


def build_action_table(target_port_encoding: str = TARGET_PORT_ENCODING) -> dict[str, ActionSpec]:
    specs = [
        ActionSpec("health", "GET /healthz", _get("/healthz")),
        ActionSpec("list_stacks", "GET /stacks", _list_stacks),
        ActionSpec("stats", "GET /stats", _get("/stats")),
        ActionSpec("get_stack", "GET /stacks/{stack_id}", _get_stack),
        ActionSpec("get_status", "GET /stacks/{stack_id}/status", _get_status),
        ActionSpec("delete_stack", "DELETE /stacks/{stack_id}", _delete_stack),
        ActionSpec("refresh_list", "GET /stacks", _list_stacks),
        ActionSpec("delete_item", "DELETE /stacks/{stack_id} + GET /stacks", _delete_item),
        ActionSpec("create", "POST /stacks", _create(target_port_encoding)),
        ActionSpec("clear_console", "Clear console", local=True),
    ]
    return {spec.action_id: spec for spec in specs}
