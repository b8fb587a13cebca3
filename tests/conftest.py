"""Shared fakes for the requests session and the token clock."""

from __future__ import annotations

import copy
import json
from typing import Any

import pytest
import requests


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._json = json_data
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        self.text = text

    def json(self) -> Any:
        if self._json is None:
            raise ValueError("response body is not JSON")
        return copy.deepcopy(self._json)


class FakeSession:
    """Returns queued responses in order and records every call."""

    def __init__(self, *responses: FakeResponse | Exception) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def _next(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._next("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._next("POST", url, **kwargs)


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: float = 1_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class FakeAuth:
    def __init__(self, token: str | None = "test-token") -> None:
        self.token = token
        self.calls = 0

    def get_access_token(self) -> str | None:
        self.calls += 1
        return self.token


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def response():
    return FakeResponse


@pytest.fixture
def session_factory():
    return FakeSession


@pytest.fixture
def fake_auth():
    return FakeAuth


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
