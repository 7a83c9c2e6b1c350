"""
Offline helpers: real ``requests.Response`` objects served by a fake session.
"""

import json
from http import HTTPStatus
from typing import Any, List, Optional

import pytest
import requests

from tmdb_qa.core.interfaces import TMDBConfig
from tmdb_qa.core.tmdb_client import TMDBClient

BASE_URL = "https://api.themoviedb.org/3"


def build_response(status: int = 200, body: Any = None, *, raw: Optional[str] = None,
                  content_type: Optional[str] = "application/json;charset=utf-8",
                  headers: Optional[dict] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.reason = HTTPStatus(status).phrase
    if raw is not None:
        content = raw.encode("utf-8")
    elif body is not None:
        content = json.dumps(body).encode("utf-8")
    else:
        content = b""
    response._content = content
    response.encoding = "utf-8"
    if content_type is not None:
        response.headers["Content-Type"] = content_type
    for key, value in (headers or {}).items():
        response.headers[key] = value
    return response


class FakeSession:
    """Stands in for requests.Session: records calls, returns a canned response or raises."""

    def __init__(self, response: Optional[requests.Response] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[tuple] = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        self.closed = True

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


class SessionRecorder:
    """Session factory handing out a new FakeSession per call"""

    def __init__(self):
        self.response = build_response(200, {})
        self.error: Optional[Exception] = None
        self.sessions: List[FakeSession] = []

    def __call__(self) -> FakeSession:
        session = FakeSession(self.response, self.error)
        self.sessions.append(session)
        return session

    @property
    def last_call(self) -> tuple:
        return self.sessions[-1].calls[-1]


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def recorder() -> SessionRecorder:
    return SessionRecorder()


@pytest.fixture
def make_client(recorder):
    def _make(api_key: Optional[str] = "test-key", read_access_token: Optional[str] = None,
              base_url: str = BASE_URL) -> TMDBClient:
        config = TMDBConfig(base_url=base_url, api_key=api_key, read_access_token=read_access_token, timeout=5)
        return TMDBClient(config, session_factory=recorder)
    return _make
