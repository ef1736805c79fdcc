"""Ayahs por capítulo, página, juz, hizb, rub el-hizb, clave o al azar.

Todas aceptan un `VerseQuery` (o mapping equivalente). Si trae `language`,
se valida contra la allow-list antes de la request.
"""

from __future__ import annotations

from collections.abc import Mapping

from quran_content.apis.base import BaseApi
from quran_content.core import endpoints
from quran_content.core.domain.language import ensure_supported
from quran_content.core.domain.models import VerseResponse
from quran_content.core.domain.queries import BaseQuery, VerseQuery
from quran_content.core.endpoints import Endpoint, QueryInput
from quran_content.core.errors import VerseError


def _query_language(query: QueryInput) -> str | None:
    if isinstance(query, BaseQuery):
        value = getattr(query, "language", None)
    elif isinstance(query, Mapping):
        value = query.get("language")
    else:
        value = None
    # Un idioma vacío no se envía, así que tampoco se valida.
    if value is None or value == "":
        return None
    return str(value)


class VerseApi(BaseApi):
    error_cls = VerseError

    async def _verses(self, endpoint: Endpoint, query: QueryInput, **path_params: object) -> VerseResponse:
        self.require(**path_params)
        language = _query_language(query)
        if language is not None:
            ensure_supported(language)
        return await self._fetch(endpoint, query, **path_params)

    async def get_verse_by_chapter(
        self, chapter_number: int | str, query: VerseQuery | QueryInput = None
    ) -> VerseResponse:
        """Ayahs de un capítulo, paginadas.

        Un capítulo inexistente no lanza excepción: el upstream responde 404
        con cuerpo y se devuelve tal cual (`result.is_error` es True).
        """

        return await self._verses(endpoints.VERSES_BY_CHAPTER, query, chapter_number=chapter_number)

    async def get_verse_by_page(
        self, page_number: int | str, query: VerseQuery | QueryInput = None
    ) -> VerseResponse:
        return await self._verses(endpoints.VERSES_BY_PAGE, query, page_number=page_number)

    async def get_verse_by_juz(
        self, juz_number: int | str, query: VerseQuery | QueryInput = None
    ) -> VerseResponse:
        return await self._verses(endpoints.VERSES_BY_JUZ, query, juz_number=juz_number)

    async def get_verse_by_hizb_number(
        self, hizb_number: int | str, query: VerseQuery | QueryInput = None
    ) -> VerseResponse:
        return await self._verses(endpoints.VERSES_BY_HIZB, query, hizb_number=hizb_number)

    async def get_verse_by_rub_el_hizb_number(
        self, rub_el_hizb_number: int | str, query: VerseQuery | QueryInput = None
    ) -> VerseResponse:
        return await self._verses(
            endpoints.VERSES_BY_RUB, query, rub_el_hizb_number=rub_el_hizb_number
        )

    async def get_specific_verse_by_verse_key(
        self, verse_key: str, query: VerseQuery | QueryInput = None
    ) -> VerseResponse:
        """Una ayah por clave `"capítulo:ayah"`; el resultado viene en `verse`."""

        return await self._verses(endpoints.VERSE_BY_KEY, query, verse_key=verse_key)

    async def get_random_ayah(self, query: VerseQuery | QueryInput = None) -> VerseResponse:
        return await self._verses(endpoints.RANDOM_VERSE, query)
