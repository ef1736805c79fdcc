"""Idiomas aceptados por la API de contenido.

Única fuente de verdad para la allow-list: cualquier operación que reciba un
parámetro `language` lo valida aquí antes de construir la request.
"""

from __future__ import annotations

from quran_content.core.errors import LanguageValidationError

DEFAULT_LANGUAGE = "en"

ALLOWED_LANGUAGES: frozenset[str] = frozenset(
    {
        "en", "ur", "bn", "tr", "es", "fr", "bs", "ru", "ml", "id",
        "uz", "nl", "de", "tg", "ta", "ja", "it", "vi", "zh", "sq",
        "fa", "bg", "bm", "ha", "pt", "ro", "hi", "sw", "kk", "th",
        "tl", "km", "as", "ko", "so", "az", "ku", "dv", "ms", "prs",
        "zgh", "am", "ce", "cs", "fi", "gu", "he", "ka", "kn", "ks",
        "lg", "mk", "mr", "mrn", "ne", "no", "om", "pl", "ps", "rw",
        "sd", "se", "si", "sr", "sv", "te", "tt", "ug", "uk", "yo",
    }
)


def is_supported(code: object) -> bool:
    """True si `code` es un ISO code aceptado por la API."""

    return isinstance(code, str) and code in ALLOWED_LANGUAGES


def ensure_supported(code: str | None) -> str:
    """Devuelve el código validado (o el idioma por defecto si es `None`).

    Raises:
        LanguageValidationError: si el código no está en la allow-list.
    """

    if code is None:
        return DEFAULT_LANGUAGE
    if not is_supported(code):
        raise LanguageValidationError(code)
    return code
