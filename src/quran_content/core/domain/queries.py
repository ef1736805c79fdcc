"""Parámetros de query reconocidos por cada familia de endpoints.

Cada modelo enumera los nombres que el upstream acepta. Los valores son
opcionales: solo los que traen valor (ni `None` ni `""`) llegan a la URL.
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.config import ConfigDict

QueryValue = str | int | bool | None


class BaseQuery(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class LanguageQuery(BaseQuery):
    language: str | None = None


class PaginationQuery(BaseQuery):
    page: QueryValue = None
    per_page: QueryValue = None


class AudioQuery(BaseQuery):
    """Filtros de `/quran/recitations/{recitation_id}`."""

    fields: QueryValue = None
    chapter_number: QueryValue = None
    juz_number: QueryValue = None
    page_number: QueryValue = None
    hizb_number: QueryValue = None
    rub_el_hizb_number: QueryValue = None
    verse_key: QueryValue = None


class VerseQuery(BaseQuery):
    """Filtros de contenido de `/verses/...`.

    `translations` y `tafsirs` son listas de ids separadas por comas
    (p.ej. `"131,20"`).
    """

    language: str | None = None
    words: QueryValue = None
    translations: QueryValue = None
    audio: QueryValue = None
    tafsirs: QueryValue = None
    word_fields: QueryValue = None
    translation_fields: QueryValue = None
    fields: QueryValue = None
    page: QueryValue = None
    per_page: QueryValue = None


class QuranTextQuery(BaseQuery):
    """Selección de ayahs para `/quran/verses/...` (una sola unidad por request)."""

    chapter_number: QueryValue = None
    juz_number: QueryValue = None
    page_number: QueryValue = None
    hizb_number: QueryValue = None
    rub_el_hizb_number: QueryValue = None
    verse_key: QueryValue = None


class TranslationQuery(QuranTextQuery):
    fields: QueryValue = None
