"""Texto del Quran: escrituras, glifos, traducción y tafsir de una selección de ayahs.

La selección (capítulo, juz, página, hizb, rub o clave) va en la query; sin
query, el upstream devuelve el texto completo.
"""

from __future__ import annotations

from quran_content.apis.base import BaseApi
from quran_content.core import endpoints
from quran_content.core.domain.models import (
    ScriptResponse,
    SingleTafsirResponse,
    SingleTranslationResponse,
)
from quran_content.core.domain.queries import QuranTextQuery, TranslationQuery
from quran_content.core.endpoints import QueryInput
from quran_content.core.errors import QuranTextError


class QuranTextApi(BaseApi):
    error_cls = QuranTextError

    async def get_indopak_script_of_ayah(
        self, query: QuranTextQuery | QueryInput = None
    ) -> ScriptResponse:
        return await self._fetch(endpoints.SCRIPT_INDOPAK, query)

    async def get_uthmani_tajweed_script_of_ayah(
        self, query: QuranTextQuery | QueryInput = None
    ) -> ScriptResponse:
        return await self._fetch(endpoints.SCRIPT_UTHMANI_TAJWEED, query)

    async def get_uthmani_script_of_ayah(
        self, query: QuranTextQuery | QueryInput = None
    ) -> ScriptResponse:
        return await self._fetch(endpoints.SCRIPT_UTHMANI, query)

    async def get_uthmani_simple_script_of_ayah(
        self, query: QuranTextQuery | QueryInput = None
    ) -> ScriptResponse:
        return await self._fetch(endpoints.SCRIPT_UTHMANI_SIMPLE, query)

    async def get_imlaei_simple_text_of_ayah(
        self, query: QuranTextQuery | QueryInput = None
    ) -> ScriptResponse:
        return await self._fetch(endpoints.SCRIPT_IMLAEI, query)

    async def get_glyph_codes_of_ayah_v1(
        self, query: QuranTextQuery | QueryInput = None
    ) -> ScriptResponse:
        """Códigos de glifo V1 (fuentes por página del Mushaf)."""

        return await self._fetch(endpoints.GLYPH_CODES_V1, query)

    async def get_glyph_codes_of_ayah_v2(
        self, query: QuranTextQuery | QueryInput = None
    ) -> ScriptResponse:
        return await self._fetch(endpoints.GLYPH_CODES_V2, query)

    async def get_a_single_translation(
        self,
        translation_id: int | str,
        query: TranslationQuery | QueryInput = None,
    ) -> SingleTranslationResponse:
        self.require(translation_id=translation_id)
        return await self._fetch(endpoints.SINGLE_TRANSLATION, query, translation_id=translation_id)

    async def get_single_tafsir(
        self,
        tafsir_id: int | str,
        query: TranslationQuery | QueryInput = None,
    ) -> SingleTafsirResponse:
        self.require(tafsir_id=tafsir_id)
        return await self._fetch(endpoints.SINGLE_TAFSIR, query, tafsir_id=tafsir_id)
