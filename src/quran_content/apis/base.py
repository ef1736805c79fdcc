"""Plantilla común de las APIs de dominio.

Cada operación sigue los mismos pasos:
1. Comprobar identificadores obligatorios (`require`).
2. Validar el idioma, si lo hay.
3. Construir el path desde su `Endpoint`.
4. Delegar en el dispatcher y decodificar al modelo del endpoint.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from quran_content.core.endpoints import Endpoint, QueryInput
from quran_content.core.errors import ParameterError, PayloadError
from quran_content.core.interfaces.dispatcher import Dispatcher


def is_missing(value: Any) -> bool:
    """`None`, cadena vacía y `0` cuentan como ausentes."""

    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


class BaseApi:
    error_cls: type[ParameterError] = ParameterError

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def require(self, **params: Any) -> None:
        """Lanza `error_cls` nombrando todos los parámetros ausentes."""

        missing = [name for name, value in params.items() if is_missing(value)]
        if missing:
            raise self.error_cls.missing(missing)

    async def _fetch(
        self,
        endpoint: Endpoint,
        query: QueryInput = None,
        **path_params: Any,
    ) -> Any:
        path = endpoint.build_path(query, error_cls=self.error_cls, **path_params)
        try:
            payload = await self._dispatcher.get(path)
        except PayloadError as exc:
            raise PayloadError(endpoint.name, exc.reason) from exc
        try:
            return endpoint.response_model.model_validate(payload)
        except ValidationError as exc:
            raise PayloadError(endpoint.name, f"{exc.error_count()} validation error(s)") from exc
