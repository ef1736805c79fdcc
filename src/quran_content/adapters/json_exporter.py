"""Exportación JSON de payloads.

Por qué JSON:
- Permite guardar respuestas de la API para pipelines o inspección offline.
- Serializa exactamente lo recibido (incluidos campos extra del upstream).
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel


def payload_to_json(payload: BaseModel) -> str:
    """JSON UTF-8 con formato estable (claves ordenadas).

    Solo se vuelcan los campos presentes en el cuerpo recibido, incluidos los
    `null` explícitos del upstream; los defaults locales no aparecen.
    """

    data = payload.model_dump(mode="json", exclude_unset=True)
    return json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True)


def export_payload_json(*, payload: BaseModel, output_path: Path) -> Path:
    """Escribe `payload` en `output_path` y devuelve el path."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(payload_to_json(payload) + "\n", encoding="utf-8")
    return output_path
