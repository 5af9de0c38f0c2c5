from __future__ import annotations

import dataclasses
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.lookup'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_CREDENTIAL_VARS = ("APOLLO_API_KEY", "GOOGLE_API_KEY", "GOOGLE_CSE_ID", "GOOGLE_CX", "GITHUB_TOKEN")


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.text = text or ("" if payload is None else str(payload))

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class FakeSession:
    """Records requests and answers them from a {url_prefix: response} routing table."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes = routes or {}
        self.calls: List[Dict[str, Any]] = []

    def _answer(self, method: str, url: str, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        for prefix in sorted(self.routes, key=len, reverse=True):
            if url.startswith(prefix):
                answer = self.routes[prefix]
                if isinstance(answer, Exception):
                    raise answer
                if callable(answer):
                    return answer(url, **kwargs)
                return answer
        return FakeResponse(404)

    def get(self, url, **kwargs):
        return self._answer("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._answer("POST", url, **kwargs)


@pytest.fixture
def make_settings(monkeypatch):
    """Build Settings from a clean environment plus explicit overrides."""
    for var in _CREDENTIAL_VARS:
        monkeypatch.delenv(var, raising=False)
    from config.settings import get_settings
    get_settings.cache_clear()

    def _make(**overrides):
        base = get_settings()
        return dataclasses.replace(base, **overrides)

    yield _make
    get_settings.cache_clear()
