from __future__ import annotations

from typing import Any

import pytest

from core.config import AppSettings


class FakeRequester:
    """Records every call and replays canned responses in order."""

    def __init__(self, *responses: Any, error: Exception | None = None) -> None:
        self.calls: list[dict[str, Any]] = []
        self._responses = list(responses)
        self._error = error

    async def __call__(self, path: str, *, method: str = "GET", body: Any | None = None) -> Any:
        self.calls.append({"path": path, "method": method, "body": body})
        if self._error is not None:
            raise self._error
        if self._responses:
            return self._responses.pop(0)
        return None

    async def __aenter__(self) -> "FakeRequester":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None


@pytest.fixture
def fake_requester():
    return FakeRequester


@pytest.fixture
def make_settings():
    def _make(**overrides: Any) -> AppSettings:
        values: dict[str, Any] = {
            "base_url": "http://kanban.test",
            "api_token": "secret-token",
            "email_or_username": None,
            "password": None,
        }
        values.update(overrides)
        return AppSettings(_env_file=None, **values)

    return _make
