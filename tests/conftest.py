from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest
import requests


@dataclass
class FakeResponse:
    status_code: int
    text: str = ""


@dataclass
class FakeSession:
    """Stands in for ``requests.Session``: records calls, replays queued replies."""

    replies: list[Any] = field(default_factory=list)
    calls: list[dict[str, Any]] = field(default_factory=list)

    def queue(self, status: int, body: Any = None) -> None:
        text = body if isinstance(body, str) else ("" if body is None else json.dumps(body))
        self.replies.append(FakeResponse(status, text))

    def queue_error(self, exc: BaseException | None = None) -> None:
        self.replies.append(exc or requests.ConnectionError("connection refused"))

    def request(self, method: str, url: str, headers: dict[str, str] | None = None, data: Any = None):
        self.calls.append({"method": method, "url": url, "headers": dict(headers or {}), "data": data})
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    @property
    def methods_and_urls(self) -> list[tuple[str, str]]:
        return [(c["method"], c["url"]) for c in self.calls]


class DictSettings:
    """QSettings-shaped backend over a dict."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}
        self.fail_writes = False
        self.fail_reads = False

    def value(self, key: str, defaultValue: Any = None) -> Any:
        if self.fail_reads:
            raise OSError("settings file vanished")
        return self.data.get(key, defaultValue)

    def setValue(self, key: str, value: Any) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)

    def sync(self) -> None:
        pass


class BrokenSettings(DictSettings):
    def setValue(self, key: str, value: Any) -> None:
        raise PermissionError("read-only profile")


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def settings_backend() -> DictSettings:
    return DictSettings()


@pytest.fixture
def container(session: FakeSession, settings_backend: DictSettings):
    from stackdesk.application.container import Container

    return Container(settings_backend=settings_backend, session=session, default_api_base="http://api.test")


@pytest.fixture
def broken_settings_backend() -> BrokenSettings:
    return BrokenSettings()


@pytest.fixture
def qapp():
    """QApplication on the offscreen platform; skips when Qt GUI libs are missing."""
    import os

    pytest.importorskip("PySide6")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    try:
        from PySide6.QtWidgets import QApplication
    except ImportError as exc:
        pytest.skip(f"PySide6 QtWidgets unavailable in this environment: {exc}")
    return QApplication.instance() or QApplication([])
