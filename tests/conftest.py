# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for Turso Platform API SDK tests.

Requests never leave the process: :class:`MockAdapter` is mounted on a
:class:`requests.Session` and replays canned responses while recording every
prepared request it receives.
"""

import io
import json
from types import SimpleNamespace

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from turso_sdk.client import TursoClient
from turso_sdk.core import _http
from turso_sdk.core.config import TursoConfig

BASE_URL = "https://api.example.test"
TEST_TOKEN = "test_token_12345"


def make_response(status=200, body=None, headers=None, reason=None, request=None):
    """Build a :class:`requests.Response`; dict/list bodies are JSON-encoded."""
    if isinstance(body, (dict, list)):
        content = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = body or b""
    response = requests.Response()
    response.status_code = status
    response.reason = reason if reason is not None else ("OK" if 200 <= status <= 299 else "Error")
    response.headers = CaseInsensitiveDict(headers or {})
    if isinstance(body, (dict, list)):
        response.headers.setdefault("Content-Type", "application/json")
    response._content = content
    response.raw = io.BytesIO(content)
    response.encoding = "utf-8"
    if request is not None:
        response.request = request
        response.url = request.url
    return response


class MockAdapter(BaseAdapter):
    """
    Transport adapter replaying queued responses.

    Each queued item is ``(status, body)``, ``(status, body, headers)``, a ready
    :class:`requests.Response` or an exception instance to raise.
    """

    def __init__(self):
        super().__init__()
        self.requests = []
        self.send_kwargs = []
        self._queue = []

    def queue(self, *items):
        self._queue.extend(items)
        return self

    def send(self, request, **kwargs):
        self.requests.append(request)
        self.send_kwargs.append(kwargs)
        if not self._queue:
            raise AssertionError(f"No queued response for {request.method} {request.url}")
        item = self._queue.pop(0)
        if isinstance(item, BaseException):
            raise item
        if isinstance(item, requests.Response):
            item.request = request
            item.url = request.url
            return item
        status, body, *rest = item
        return make_response(status, body, rest[0] if rest else None, request=request)

    def close(self):
        pass

    @property
    def last_request(self):
        return self.requests[-1]

    @property
    def call_count(self):
        return len(self.requests)


@pytest.fixture
def adapter():
    return MockAdapter()


@pytest.fixture
def session(adapter):
    s = requests.Session()
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    yield s
    s.close()


@pytest.fixture
def test_config():
    """Test configuration with safe defaults (no jitter, tiny backoff)."""
    return TursoConfig(base_url=BASE_URL, auth_token=TEST_TOKEN, backoff=0.01, jitter=False)


@pytest.fixture
def client(session, test_config):
    c = TursoClient(TEST_TOKEN, config=test_config, session=session)
    yield c
    c.close()


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    """Retries never actually wait in tests."""
    sleeps = []
    monkeypatch.setattr(_http, "time", SimpleNamespace(sleep=sleeps.append))
    return sleeps
