"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar las APIs.
- El transporte HTTP y la CLI leen la misma configuración.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quran_content import __version__

DEFAULT_API_BASE_URL = "https://api.quran.com/api/v4"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "quran-content"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "quran-content"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "quran-content"
    return Path.home() / ".config" / "quran-content"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    - `None`: la clave no se toca (se conserva si ya existía).
    - `""`: la clave se elimina del fichero.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    for key, value in values.items():
        if value is None:
            continue
        if value == "":
            existing.pop(key, None)
        else:
            existing[key] = value

    lines = ["# quran-content user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class ClientSettings(BaseSettings):
    """Configuración central del cliente.

    Todas las variables usan el prefijo `QURAN_CONTENT_`
    (p.ej. `QURAN_CONTENT_API_TOKEN`).
    """

    model_config = SettingsConfigDict(
        env_prefix="QURAN_CONTENT_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        min_length=8,
        description="Base URL de la API de contenido (sin barra final).",
    )
    api_token: str | None = Field(
        default=None,
        description="Token Bearer opcional; se adjunta en cada request.",
    )
    client_id: str | None = Field(
        default=None,
        description="Identificador de cliente (cabecera `x-client-id`), si la API lo exige.",
    )
    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    max_connections: int = Field(
        default=100,
        ge=1,
        description="Sockets concurrentes máximos del pool.",
    )
    max_keepalive_connections: int = Field(
        default=25,
        ge=0,
        description="Sockets ociosos que el pool mantiene abiertos.",
    )
    verify_tls: bool = Field(
        default=True,
        description="Verificar certificados TLS del servidor.",
    )
    user_agent: str = Field(
        default=f"quran-content/{__version__}",
        min_length=1,
        description="User-Agent enviado a la API.",
    )

    @model_validator(mode="after")
    def _normalize(self) -> "ClientSettings":
        self.api_base_url = self.api_base_url.rstrip("/")
        if self.max_keepalive_connections > self.max_connections:
            raise ValueError("max_keepalive_connections cannot exceed max_connections")
        return self
