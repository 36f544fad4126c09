"""HTTP request pipeline for the stack API.

One call per :meth:`RequestPipeline.perform_request`: resolve the base URL, attach
the API key header when one is configured, send an optional JSON body, and parse
the reply leniently. Any HTTP response becomes a :class:`ResponsePayload`; only a
transport failure raises.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

import requests

from stackdesk.config import API_KEY_HEADER, DEFAULT_API_BASE
from stackdesk.core.errors import ResponseError, TransportError
from stackdesk.domain.models import ActionRequest, JsonBody, ResponsePayload

log = logging.getLogger(__name__)

TextProvider = Callable[[], "str | None"]


def resolve_base_url(override: str | None, default: str = DEFAULT_API_BASE) -> str:
    """Override (trimmed of trailing slashes) if set, else the default origin."""
    raw = (override or "").strip()
    if raw:
        return raw.rstrip("/")
    return default.strip().rstrip("/")


def join_url(base: str, path: str) -> str:
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def parse_body(raw: str) -> JsonBody:
    """JSON when possible, ``{}`` for an empty body, raw text otherwise."""
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        return raw


class RequestPipeline:
    """Performs single HTTP calls against the configured stack API."""

    def __init__(
        self,
        base_url_override: TextProvider | None = None,
        api_key: TextProvider | None = None,
        *,
        default_base: str = DEFAULT_API_BASE,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url_override = base_url_override or (lambda: None)
        self._api_key = api_key or (lambda: None)
        self._default_base = default_base
        self._session = session or requests.Session()

    def base_url(self) -> str:
        return resolve_base_url(self._base_url_override(), self._default_base)

    def url_for(self, path: str) -> str:
        return join_url(self.base_url(), path)

    def headers(self, with_body: bool) -> dict[str, str]:
        headers: dict[str, str] = {}
        key = (self._api_key() or "").strip()
        if key:
            headers[API_KEY_HEADER] = key
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    def perform_request(self, method: str, path: str, body: Any = None) -> ResponsePayload:
        method = method.upper()
        url = self.url_for(path)
        data = json.dumps(body) if body is not None else None
        log.debug("%s %s", method, url)
        try:
            resp = self._session.request(method, url, headers=self.headers(body is not None), data=data)
        except requests.RequestException as exc:
            log.warning("Transport failure for %s %s: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}", exc) from exc
        status = int(resp.status_code)
        payload = ResponsePayload(
            method=method,
            url=url,
            status=status,
            ok=200 <= status < 300,
            body=parse_body(resp.text),
        )
        log.debug("%s %s -> %s", method, url, status)
        return payload

    def request(self, method: str, path: str, body: Any = None) -> ResponsePayload:
        """Like :meth:`perform_request`, but a non-2xx reply raises ResponseError."""
        payload = self.perform_request(method, path, body)
        if not payload.ok:
            raise ResponseError(payload)
        return payload

    def send(self, req: ActionRequest) -> ResponsePayload:
        """Entry point for dispatcher handlers: one ActionRequest, one call."""
        return self.request(req.method, req.path, req.body)
