"""Catálogo de endpoints.

Cada operación pública usa exactamente un `Endpoint`: plantilla de path,
modelo de query (nombres reconocidos) y modelo de respuesta.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from string import Formatter
from urllib.parse import quote, urlencode

from pydantic import BaseModel, ValidationError

from quran_content.core.domain import models, queries
from quran_content.core.domain.queries import BaseQuery, QueryValue
from quran_content.core.errors import ParameterError

QueryInput = BaseQuery | Mapping[str, QueryValue] | None


def _encode_value(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_blank(value: QueryValue) -> bool:
    return value is None or value == ""


def encode_query(
    query: QueryInput,
    model: type[BaseQuery] | None,
    *,
    error_cls: type[ParameterError] = ParameterError,
) -> str:
    """Serializa `query` como `key=value&...` (sin `?`).

    - Modelo: campos en orden de declaración.
    - Mapping: orden de inserción; se valida contra `model` y cualquier nombre
      no reconocido produce `error_cls`.
    - Entradas `None` o `""` se omiten. Devuelve `""` si no queda nada.
    """

    if query is None:
        return ""

    if isinstance(query, BaseModel):
        if model is None:
            raise error_cls("This endpoint accepts no query parameters")
        if not isinstance(query, model):
            raise error_cls(
                f"{type(query).__name__} is not accepted here; expected {model.__name__}",
            )
        items = [(name, getattr(query, name)) for name in type(query).model_fields]
    else:
        if model is None:
            if query:
                raise error_cls(
                    "This endpoint accepts no query parameters",
                    parameters=tuple(query),
                )
            return ""
        unknown = [name for name in query if name not in model.model_fields]
        if unknown:
            raise error_cls(
                f"Unknown query parameter(s): {', '.join(unknown)}",
                parameters=unknown,
            )
        try:
            model.model_validate(dict(query))
        except ValidationError as exc:
            bad = list(dict.fromkeys(str(err["loc"][0]) for err in exc.errors() if err.get("loc")))
            raise error_cls(f"Invalid query parameter(s): {', '.join(bad)}", parameters=bad) from exc
        items = list(query.items())

    pairs = [(name, _encode_value(value)) for name, value in items if not _is_blank(value)]
    return urlencode(pairs)


@dataclass(frozen=True)
class Endpoint:
    name: str
    template: str
    response_model: type[models.ApiPayload]
    query_model: type[BaseQuery] | None = None

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(field for _, field, _, _ in Formatter().parse(self.template) if field)

    def build_path(
        self,
        query: QueryInput = None,
        *,
        error_cls: type[ParameterError] = ParameterError,
        **path_params: object,
    ) -> str:
        """Sustituye los parámetros de path y añade la query si hay valores.

        Raises:
            error_cls: si falta algún placeholder de la plantilla.
        """

        missing = [name for name in self.path_params if path_params.get(name) is None]
        if missing:
            raise error_cls.missing(missing)

        path = self.template.format(
            **{key: quote(str(value), safe=":") for key, value in path_params.items()}
        )
        encoded = encode_query(query, self.query_model, error_cls=error_cls)
        return f"{path}?{encoded}" if encoded else path


# Audio
CHAPTER_AUDIO_OF_RECITER = Endpoint(
    "chapter_audio_of_reciter",
    "/chapter_recitations/{id}/{chapter_number}",
    models.ChapterAudioResponse,
)
ALL_CHAPTERS_AUDIO_OF_RECITER = Endpoint(
    "all_chapters_audio_of_reciter",
    "/chapter_recitations/{id}",
    models.ChapterAudioListResponse,
)
RECITATIONS_BY_LANGUAGE = Endpoint(
    "recitations_by_language",
    "/resources/languages",
    models.LanguageListResponse,
    queries.LanguageQuery,
)
RECITATION_AUDIO_FILES = Endpoint(
    "recitation_audio_files",
    "/quran/recitations/{recitation_id}",
    models.RecitationAudioResponse,
    queries.AudioQuery,
)
CHAPTER_RECITERS = Endpoint(
    "chapter_reciters",
    "/resources/chapter_reciters",
    models.ChapterRecitersResponse,
    queries.LanguageQuery,
)
AYAH_RECITATIONS_BY_CHAPTER = Endpoint(
    "ayah_recitations_by_chapter",
    "/recitations/{recitation_id}/by_chapter/{chapter_number}",
    models.AyahRecitationResponse,
    queries.PaginationQuery,
)
AYAH_RECITATIONS_BY_JUZ = Endpoint(
    "ayah_recitations_by_juz",
    "/recitations/{recitation_id}/by_juz/{juz_number}",
    models.AyahRecitationResponse,
    queries.PaginationQuery,
)
AYAH_RECITATIONS_BY_PAGE = Endpoint(
    "ayah_recitations_by_page",
    "/recitations/{recitation_id}/by_page/{page_number}",
    models.AyahRecitationResponse,
    queries.PaginationQuery,
)
AYAH_RECITATIONS_BY_RUB = Endpoint(
    "ayah_recitations_by_rub",
    "/recitations/{recitation_id}/by_rub/{rub_el_hizb_number}",
    models.AyahRecitationResponse,
    queries.PaginationQuery,
)
AYAH_RECITATIONS_BY_HIZB = Endpoint(
    "ayah_recitations_by_hizb",
    "/recitations/{recitation_id}/by_hizb/{hizb_number}",
    models.AyahRecitationResponse,
    queries.PaginationQuery,
)
AYAH_RECITATIONS_BY_AYAH = Endpoint(
    "ayah_recitations_by_ayah",
    "/recitations/{recitation_id}/by_ayah/{ayah_key}",
    models.AyahRecitationResponse,
    queries.PaginationQuery,
)

# Chapters / juzs
LIST_CHAPTERS = Endpoint("list_chapters", "/chapters", models.ChapterListResponse, queries.LanguageQuery)
GET_CHAPTER = Endpoint("get_chapter", "/chapters/{id}", models.ChapterResponse, queries.LanguageQuery)
CHAPTER_INFO = Endpoint(
    "chapter_info",
    "/chapters/{chapter_id}/info",
    models.ChapterInfoResponse,
    queries.LanguageQuery,
)
LIST_JUZS = Endpoint("list_juzs", "/juzs", models.JuzListResponse)

# Resources
RECITATION_INFO = Endpoint(
    "recitation_info",
    "/resources/recitations/{recitation_id}/info",
    models.ResourceInfoResponse,
)
TRANSLATION_INFO = Endpoint(
    "translation_info",
    "/resources/translations/{translation_id}/info",
    models.ResourceInfoResponse,
)
TAFSIR_INFO = Endpoint(
    "tafsir_info",
    "/resources/tafsirs/{tafsir_id}/info",
    models.ResourceInfoResponse,
)
TRANSLATIONS = Endpoint(
    "translations",
    "/resources/translations",
    models.TranslationListResponse,
    queries.LanguageQuery,
)
TAFSIRS = Endpoint("tafsirs", "/resources/tafsirs", models.TafsirListResponse, queries.LanguageQuery)
RECITATIONS = Endpoint(
    "recitations",
    "/resources/recitations",
    models.RecitationListResponse,
    queries.LanguageQuery,
)
RECITATION_STYLES = Endpoint(
    "recitation_styles",
    "/resources/recitation_styles",
    models.RecitationStylesResponse,
)
LANGUAGES = Endpoint("languages", "/resources/languages", models.LanguageListResponse)
CHAPTER_INFOS = Endpoint("chapter_infos", "/resources/chapter_infos", models.ChapterInfosResponse)
VERSE_MEDIA = Endpoint("verse_media", "/resources/verse_media", models.VerseMediaResponse)

# Verses
VERSES_BY_CHAPTER = Endpoint(
    "verses_by_chapter",
    "/verses/by_chapter/{chapter_number}",
    models.VerseResponse,
    queries.VerseQuery,
)
VERSES_BY_PAGE = Endpoint(
    "verses_by_page",
    "/verses/by_page/{page_number}",
    models.VerseResponse,
    queries.VerseQuery,
)
VERSES_BY_JUZ = Endpoint(
    "verses_by_juz",
    "/verses/by_juz/{juz_number}",
    models.VerseResponse,
    queries.VerseQuery,
)
VERSES_BY_HIZB = Endpoint(
    "verses_by_hizb",
    "/verses/by_hizb/{hizb_number}",
    models.VerseResponse,
    queries.VerseQuery,
)
VERSES_BY_RUB = Endpoint(
    "verses_by_rub",
    "/verses/by_rub/{rub_el_hizb_number}",
    models.VerseResponse,
    queries.VerseQuery,
)
VERSE_BY_KEY = Endpoint(
    "verse_by_key",
    "/verses/by_key/{verse_key}",
    models.VerseResponse,
    queries.VerseQuery,
)
RANDOM_VERSE = Endpoint("random_verse", "/verses/random", models.VerseResponse, queries.VerseQuery)

# Quran text
SCRIPT_INDOPAK = Endpoint(
    "script_indopak", "/quran/verses/indopak", models.ScriptResponse, queries.QuranTextQuery
)
SCRIPT_UTHMANI_TAJWEED = Endpoint(
    "script_uthmani_tajweed",
    "/quran/verses/uthmani_tajweed",
    models.ScriptResponse,
    queries.QuranTextQuery,
)
SCRIPT_UTHMANI = Endpoint(
    "script_uthmani", "/quran/verses/uthmani", models.ScriptResponse, queries.QuranTextQuery
)
SCRIPT_UTHMANI_SIMPLE = Endpoint(
    "script_uthmani_simple",
    "/quran/verses/uthmani_simple",
    models.ScriptResponse,
    queries.QuranTextQuery,
)
SCRIPT_IMLAEI = Endpoint(
    "script_imlaei", "/quran/verses/imlaei", models.ScriptResponse, queries.QuranTextQuery
)
GLYPH_CODES_V1 = Endpoint(
    "glyph_codes_v1", "/quran/verses/code_v1", models.ScriptResponse, queries.QuranTextQuery
)
GLYPH_CODES_V2 = Endpoint(
    "glyph_codes_v2", "/quran/verses/code_v2", models.ScriptResponse, queries.QuranTextQuery
)
SINGLE_TRANSLATION = Endpoint(
    "single_translation",
    "/quran/translations/{translation_id}",
    models.SingleTranslationResponse,
    queries.TranslationQuery,
)
SINGLE_TAFSIR = Endpoint(
    "single_tafsir",
    "/quran/tafsirs/{tafsir_id}",
    models.SingleTafsirResponse,
    queries.TranslationQuery,
)
