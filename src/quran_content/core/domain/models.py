"""Modelos de payload (Pydantic v2).

Reflejan el contrato JSON de la API de contenido sin transformarlo.

Reglas:
- `extra="allow"`: campos nuevos del upstream no rompen la decodificación.
- Campos opcionales con default: la API responde 200..499 con cuerpo, y un
  404 llega como `{"status": 404, "error": "..."}`. Ese cuerpo se devuelve
  como payload normal; revisar `payload.is_error` antes de usarlo.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _Entity(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ApiPayload(_Entity):
    """Base de toda respuesta de endpoint."""

    status: int | None = Field(
        default=None,
        description="Status HTTP que el upstream incluye en cuerpos de error.",
    )
    error: str | None = Field(
        default=None,
        description="Descripción del error devuelta por el upstream (p.ej. 'not found').",
    )
    message: str | None = Field(
        default=None,
        description="Mensaje adicional del upstream, si lo hay.",
    )

    @property
    def is_error(self) -> bool:
        """True si el cuerpo describe un error lógico del upstream."""

        if self.error is not None:
            return True
        return self.status is not None and self.status >= 400


class TranslatedName(_Entity):
    name: str | None = None
    language_name: str | None = None


class Pagination(_Entity):
    per_page: int | None = None
    current_page: int | None = None
    next_page: int | None = None
    total_pages: int | None = None
    total_records: int | None = None


# --- Audio -----------------------------------------------------------------


class ChapterAudioFile(_Entity):
    id: int | None = None
    chapter_id: int | None = None
    file_size: float | None = None
    format: str | None = None
    total_files: int | None = None
    audio_url: str | None = None


class ChapterAudioResponse(ApiPayload):
    audio_file: ChapterAudioFile | None = None


class ChapterAudioListResponse(ApiPayload):
    audio_files: list[ChapterAudioFile] = Field(default_factory=list)


class RecitationAudioFile(_Entity):
    """Audio de una ayah dentro de una recitación."""

    verse_key: str | None = None
    url: str | None = None
    duration: float | None = None
    format: str | None = None
    segments: list[Any] = Field(default_factory=list)


class RecitationMeta(_Entity):
    reciter_name: str | None = None
    recitation_style: str | None = None


class RecitationAudioResponse(ApiPayload):
    audio_files: list[RecitationAudioFile] = Field(default_factory=list)
    meta: RecitationMeta | None = None
    pagination: Pagination | None = None


class AyahRecitationResponse(ApiPayload):
    """Audios por ayah para una unidad (surah, juz, página, rub, hizb, ayah)."""

    audio_files: list[RecitationAudioFile] = Field(default_factory=list)
    pagination: Pagination | None = None


class Reciter(_Entity):
    id: int | None = None
    name: str | None = None
    arabic_name: str | None = None
    relative_path: str | None = None
    format: str | None = None
    files_size: float | None = None
    translated_name: TranslatedName | None = None


class ChapterRecitersResponse(ApiPayload):
    reciters: list[Reciter] = Field(default_factory=list)


# --- Chapters / juzs ---------------------------------------------------------


class Chapter(_Entity):
    id: int | None = None
    revelation_place: str | None = None
    revelation_order: int | None = None
    bismillah_pre: bool | None = None
    name_simple: str | None = None
    name_complex: str | None = None
    name_arabic: str | None = None
    verses_count: int | None = None
    pages: list[int] = Field(default_factory=list)
    translated_name: TranslatedName | None = None


class ChapterListResponse(ApiPayload):
    chapters: list[Chapter] = Field(default_factory=list)


class ChapterResponse(ApiPayload):
    chapter: Chapter | None = None


class ChapterInfo(_Entity):
    id: int | None = None
    chapter_id: int | None = None
    language_name: str | None = None
    short_text: str | None = None
    source: str | None = None
    text: str | None = None


class ChapterInfoResponse(ApiPayload):
    chapter_info: ChapterInfo | None = None


class Juz(_Entity):
    id: int | None = None
    juz_number: int | None = None
    verse_mapping: dict[str, str] = Field(default_factory=dict)
    first_verse_id: int | None = None
    last_verse_id: int | None = None
    verses_count: int | None = None


class JuzListResponse(ApiPayload):
    juzs: list[Juz] = Field(default_factory=list)


# --- Resources ---------------------------------------------------------------


class Recitation(_Entity):
    id: int | None = None
    reciter_name: str | None = None
    style: str | None = None
    translated_name: TranslatedName | None = None


class RecitationListResponse(ApiPayload):
    recitations: list[Recitation] = Field(default_factory=list)


class ResourceInfo(_Entity):
    id: int | None = None
    info: Any = None


class ResourceInfoResponse(ApiPayload):
    """Info de recitación, traducción o tafsir.

    El upstream devuelve `{"info": {...}}` o `{"id": ..., "info": "<html>"}`
    según el recurso; ambos se aceptan.
    """

    id: int | None = None
    info: ResourceInfo | str | None = None


class TranslationResource(_Entity):
    id: int | None = None
    name: str | None = None
    author_name: str | None = None
    slug: str | None = None
    language_name: str | None = None
    translated_name: TranslatedName | None = None


class TranslationListResponse(ApiPayload):
    translations: list[TranslationResource] = Field(default_factory=list)


class TafsirListResponse(ApiPayload):
    tafsirs: list[TranslationResource] = Field(default_factory=list)


class RecitationStylesResponse(ApiPayload):
    recitation_styles: dict[str, str] | list[dict[str, Any]] = Field(default_factory=dict)


class Language(_Entity):
    id: int | None = None
    name: str | None = None
    iso_code: str | None = None
    native_name: str | None = None
    direction: str | None = None
    translations_count: int | None = None
    translated_name: TranslatedName | None = None


class LanguageListResponse(ApiPayload):
    languages: list[Language] = Field(default_factory=list)


class ChapterInfosResponse(ApiPayload):
    chapter_infos: list[TranslationResource] = Field(default_factory=list)


class VerseMediaResponse(ApiPayload):
    verse_media: list[TranslationResource] = Field(default_factory=list)


# --- Verses ------------------------------------------------------------------


class WordText(_Entity):
    text: str | None = None
    language_name: str | None = None


class Word(_Entity):
    id: int | None = None
    position: int | None = None
    audio_url: str | None = None
    char_type_name: str | None = None
    line_number: int | None = None
    page_number: int | None = None
    code_v1: str | None = None
    text: str | None = None
    translation: WordText | None = None
    transliteration: WordText | None = None


class VerseTranslation(_Entity):
    id: int | None = None
    resource_id: int | None = None
    text: str | None = None


class VerseTafsir(_Entity):
    id: int | None = None
    resource_id: int | None = None
    language_name: str | None = None
    name: str | None = None
    text: str | None = None


class Verse(_Entity):
    id: int | None = None
    verse_number: int | None = None
    verse_key: str | None = None
    page_number: int | None = None
    juz_number: int | None = None
    hizb_number: int | None = None
    rub_el_hizb_number: int | None = None
    sajdah_type: Any = None
    sajdah_number: Any = None
    words: list[Word] = Field(default_factory=list)
    translations: list[VerseTranslation] = Field(default_factory=list)
    tafsirs: list[VerseTafsir] = Field(default_factory=list)


class VerseResponse(ApiPayload):
    """Listados (`verses` + `pagination`) o una sola ayah (`verse`).

    `by_key` y `random` devuelven `verse`; el resto, `verses`.
    """

    verses: list[Verse] = Field(default_factory=list)
    verse: Verse | None = None
    pagination: Pagination | None = None


# --- Quran text --------------------------------------------------------------


class ScriptVerse(_Entity):
    """Texto de una ayah en una escritura concreta (solo una clave viene poblada)."""

    id: int | None = None
    verse_key: str | None = None
    text_indopak: str | None = None
    text_uthmani: str | None = None
    text_uthmani_simple: str | None = None
    text_uthmani_tajweed: str | None = None
    text_imlaei: str | None = None
    code_v1: str | None = None
    v1_page: int | None = None
    code_v2: str | None = None
    v2_page: int | None = None


class ScriptResponse(ApiPayload):
    verses: list[ScriptVerse] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)


class TranslationMeta(_Entity):
    translation_name: str | None = None
    author_name: str | None = None


class SingleTranslationResponse(ApiPayload):
    translations: list[VerseTranslation] = Field(default_factory=list)
    meta: TranslationMeta | None = None


class TafsirMeta(_Entity):
    tafsir_name: str | None = None
    author_name: str | None = None


class SingleTafsirResponse(ApiPayload):
    tafsirs: list[VerseTafsir] = Field(default_factory=list)
    meta: TafsirMeta | None = None
