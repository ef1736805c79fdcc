"""Dispatcher de requests y normalización de respuestas.

Todas las APIs de dominio pasan por `RequestDispatcher.get`: una única
request GET por llamada, sin reintentos ni caché.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from quran_content.adapters.http_client import build_async_client
from quran_content.core.config import ClientSettings
from quran_content.core.errors import PayloadError

logger = logging.getLogger(__name__)

RESOLVED_STATUS_RANGE = range(200, 500)


def is_resolved_status(status_code: int) -> bool:
    """Status que el transporte entrega como respuesta (no como excepción)."""

    return status_code in RESOLVED_STATUS_RANGE


def unwrap_response(response: httpx.Response) -> Any:
    """Devuelve el cuerpo JSON de `response`.

    - 200..499: se resuelve con el cuerpo, aunque describa un error del
      upstream (p.ej. `{"status": 404, "error": "not found"}`).
    - Cualquier otro status: `httpx.HTTPStatusError` sin modificar.
    - Cuerpo que no es JSON (p.ej. una página 429 de un CDN): `PayloadError`.
    """

    if not is_resolved_status(response.status_code):
        response.raise_for_status()
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError as exc:
        raise PayloadError(
            response.request.url.path,
            f"body is not JSON (status {response.status_code})",
        ) from exc


class RequestDispatcher:
    """Dueño del `httpx.AsyncClient` compartido.

    El cliente se crea al primer uso y vive hasta `aclose()`; todas las
    llamadas concurrentes comparten su pool de conexiones.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        token: str | None = None,
        extra_headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._client = client
        self._owns_client = client is None
        self._token = token
        self._extra_headers = extra_headers
        self._transport = transport

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = build_async_client(
                self._settings,
                token=self._token,
                extra_headers=self._extra_headers,
                transport=self._transport,
            )
        return self._client

    async def get(self, path: str) -> Any:
        logger.debug("GET %s", path)
        response = await self.client.get(path)
        logger.debug("GET %s -> %s", path, response.status_code)
        if 400 <= response.status_code < 500:
            logger.debug("Passing through upstream %s body for %s", response.status_code, path)
        return unwrap_response(response)

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "RequestDispatcher":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
