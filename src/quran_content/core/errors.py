"""Errores del cliente.

Taxonomía:
- `ParameterError` (y una subclase por módulo): falta un identificador
  obligatorio. Se lanza antes de construir cualquier request.
- `LanguageValidationError`: idioma fuera de la allow-list. También antes de red.
- `PayloadError`: el cuerpo no es JSON o no encaja con el modelo del endpoint.

Los fallos de transporte (red, status >= 500) no se envuelven: llegan al
llamador como las excepciones originales de `httpx`.
"""

from __future__ import annotations

from typing import Any, Iterable

LANGUAGE_NOT_SUPPORTED = "Provided language is not supported"


class QuranContentError(Exception):
    """Base de todos los errores propios de la librería."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class ParameterError(QuranContentError):
    """Uno o más parámetros obligatorios faltan o están vacíos."""

    def __init__(self, message: str, parameters: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.parameters = tuple(parameters)

    @classmethod
    def missing(cls, parameters: Iterable[str]) -> "ParameterError":
        names = tuple(parameters)
        verb = "is" if len(names) == 1 else "are"
        return cls(f"{' and '.join(names)} {verb} required", parameters=names)


class AudioError(ParameterError):
    pass


class ChapterError(ParameterError):
    pass


class ResourceError(ParameterError):
    pass


class VerseError(ParameterError):
    pass


class QuranTextError(ParameterError):
    pass


class LanguageValidationError(QuranContentError):
    """El código de idioma no está en `ALLOWED_LANGUAGES`."""

    def __init__(self, language: object) -> None:
        super().__init__(LANGUAGE_NOT_SUPPORTED)
        self.language = language


class PayloadError(QuranContentError):
    """La respuesta no pudo decodificarse al modelo tipado del endpoint."""

    def __init__(self, endpoint: str, reason: str) -> None:
        super().__init__(
            "Response payload does not match the expected shape",
            {"endpoint": endpoint, "reason": reason},
        )
        self.endpoint = endpoint
        self.reason = reason
