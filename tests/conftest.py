"""
Shared fixtures: settings aislados del entorno y dispatchers/transportes de prueba.
"""
from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from quran_content.core.config import ClientSettings


class StubDispatcher:
    """Records every requested path and answers with a canned payload."""

    def __init__(self, payload: Any = None) -> None:
        self.payload = {} if payload is None else payload
        self.paths: list[str] = []

    async def get(self, path: str) -> Any:
        self.paths.append(path)
        return self.payload


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps the requests it served."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response] | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._responder = responder or (lambda request: httpx.Response(200, json={}))
        super().__init__(self._record)

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any QURAN_CONTENT_* variable from the process environment."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("QURAN_CONTENT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings(clean_env) -> ClientSettings:
    return ClientSettings(_env_file=None)


@pytest.fixture
def stub_dispatcher() -> Callable[..., StubDispatcher]:
    """Factory: `stub_dispatcher({"chapters": []})`."""
    return StubDispatcher


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """Factory: `recording_transport(lambda request: httpx.Response(200, json={...}))`."""
    return RecordingTransport


@pytest.fixture
def fatiha_chapter() -> dict[str, Any]:
    return {
        "id": 1,
        "revelation_place": "makkah",
        "revelation_order": 5,
        "bismillah_pre": False,
        "name_simple": "Al-Fatihah",
        "name_complex": "Al-Fātiĥah",
        "name_arabic": "الفاتحة",
        "verses_count": 7,
        "pages": [1, 1],
        "translated_name": {"language_name": "english", "name": "The Opener"},
    }
