"""Shared fakes: an in-memory stand-in for requests.Session."""

from __future__ import annotations

import pytest
import requests

from wp_tools.config import WordPressConfig


class FakeResponse:
    def __init__(self, status_code=200, body=None, headers=None, text=None):
        self.status_code = status_code
        self._body = body
        self.headers = headers or {}
        self.text = text if text is not None else str(body)

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class FakeSession:
    """Replays queued responses (or raises queued exceptions) and records calls."""

    def __init__(self, get=None, delete=None, post=None):
        self.headers = {}
        self.queues = {"GET": list(get or []), "DELETE": list(delete or []), "POST": list(post or [])}
        self.calls = []

    def _next(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        outcome = self.queues[method].pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def get(self, url, **kwargs):
        return self._next("GET", url, **kwargs)

    def delete(self, url, **kwargs):
        return self._next("DELETE", url, **kwargs)

    def post(self, url, **kwargs):
        return self._next("POST", url, **kwargs)


def post_json(post_id, title, date, status="draft", **extra):
    data = {
        "id": post_id,
        "title": {"rendered": title},
        "status": status,
        "date": date,
        "modified": date,
        "slug": f"post-{post_id}",
    }
    data.update(extra)
    return data


@pytest.fixture
def config() -> WordPressConfig:
    return WordPressConfig(
        site_url="https://example.com",
        username="editor",
        app_password="abcd efgh ijkl",
        per_page=2,
    )


@pytest.fixture
def timeout_error() -> requests.exceptions.Timeout:
    return requests.exceptions.Timeout("read timed out")
