"""Contrato del dispatcher de requests.

Por qué Protocol:
- Las APIs de dominio dependen de esta abstracción, no de `httpx`.
- Los tests pueden sustituirlo por un stub que registre los paths pedidos.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Dispatcher(Protocol):
    """Punto único por el que pasan todas las operaciones.

    Reglas de diseño:
    - `get` es asíncrono: una única ida y vuelta de red por llamada.
    - Recibe un path relativo ya construido (incluida la query).
    - Devuelve el cuerpo decodificado; los fallos de transporte se propagan.
    """

    async def get(self, path: str) -> Any:
        ...
