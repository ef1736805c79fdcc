"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, timeouts, headers, pool de conexiones y auth.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

from collections.abc import Generator

import httpx

from quran_content.core.config import ClientSettings

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json;charset=utf-8",
    "Accept": "application/json",
    "Access-Control-Allow-Origin": "*",
}


class BearerTokenAuth(httpx.Auth):
    """Adjunta `Authorization: Bearer <token>` a cada request saliente.

    Se aplica en el momento del envío, no al construir el cliente.
    """

    def __init__(self, token: str) -> None:
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


def build_default_headers(
    settings: ClientSettings,
    extra_headers: dict[str, str] | None = None,
) -> dict[str, str]:
    headers = {**DEFAULT_HEADERS, "User-Agent": settings.user_agent}
    if settings.client_id:
        headers["x-client-id"] = settings.client_id
    if extra_headers:
        headers.update(extra_headers)
    return headers


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    token: str | None = None,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` listo para la API de contenido.

    - `token` tiene prioridad sobre `settings.api_token`.
    - `extra_headers` se mezcla encima de las cabeceras por defecto.
    - El pool (`max_connections` / `max_keepalive_connections`) se reutiliza
      entre llamadas mientras el cliente siga abierto.
    """

    settings = settings or ClientSettings()
    token = token or settings.api_token

    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        headers=build_default_headers(settings, extra_headers),
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        limits=httpx.Limits(
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        ),
        auth=BearerTokenAuth(token) if token else None,
        verify=settings.verify_tls,
        follow_redirects=True,
        transport=transport,
    )
