"""Audio: recitaciones por capítulo y por ayah.

Docs upstream: https://api-docs.quran.com/docs/quran.com_versioned/4.0.0/
"""

from __future__ import annotations

from quran_content.apis.base import BaseApi
from quran_content.core import endpoints
from quran_content.core.domain.language import DEFAULT_LANGUAGE, ensure_supported
from quran_content.core.domain.models import (
    AyahRecitationResponse,
    ChapterAudioListResponse,
    ChapterAudioResponse,
    ChapterRecitersResponse,
    LanguageListResponse,
    RecitationAudioResponse,
)
from quran_content.core.domain.queries import AudioQuery, LanguageQuery, PaginationQuery
from quran_content.core.endpoints import QueryInput
from quran_content.core.errors import AudioError


class AudioApi(BaseApi):
    error_cls = AudioError

    async def get_chapters_audio_of_a_reciter(
        self, id: int, chapter_number: int
    ) -> ChapterAudioResponse:
        """Audio de un capítulo completo para un recitador."""

        self.require(id=id, chapter_number=chapter_number)
        return await self._fetch(
            endpoints.CHAPTER_AUDIO_OF_RECITER, id=id, chapter_number=chapter_number
        )

    async def get_all_chapters_audio_of_a_reciter(self, id: int) -> ChapterAudioListResponse:
        """Todos los audios de capítulo de un recitador."""

        self.require(id=id)
        return await self._fetch(endpoints.ALL_CHAPTERS_AUDIO_OF_RECITER, id=id)

    async def get_recitations(self, language: str = DEFAULT_LANGUAGE) -> LanguageListResponse:
        """Recitaciones disponibles para `language`.

        Consulta `/resources/languages?language=...`; el listado de recitaciones
        propiamente dicho está en `ResourceApi.get_recitations`.
        """

        language = ensure_supported(language)
        return await self._fetch(
            endpoints.RECITATIONS_BY_LANGUAGE, LanguageQuery(language=language)
        )

    async def get_all_audio_files_of_a_recitation(
        self,
        recitation_id: int,
        query: AudioQuery | QueryInput = None,
    ) -> RecitationAudioResponse:
        """Audios por ayah de una recitación, filtrables por capítulo, juz, página, etc.

        Solo los filtros con valor se envían en la query.
        """

        self.require(recitation_id=recitation_id)
        return await self._fetch(
            endpoints.RECITATION_AUDIO_FILES, query, recitation_id=recitation_id
        )

    async def get_list_of_chapter_reciters(
        self, language: str = DEFAULT_LANGUAGE
    ) -> ChapterRecitersResponse:
        language = ensure_supported(language)
        return await self._fetch(endpoints.CHAPTER_RECITERS, LanguageQuery(language=language))

    async def get_ayah_recitations_for_specific_surah(
        self,
        recitation_id: int,
        chapter_number: int,
        query: PaginationQuery | QueryInput = None,
    ) -> AyahRecitationResponse:
        self.require(recitation_id=recitation_id, chapter_number=chapter_number)
        return await self._fetch(
            endpoints.AYAH_RECITATIONS_BY_CHAPTER,
            query,
            recitation_id=recitation_id,
            chapter_number=chapter_number,
        )

    async def get_ayah_recitations_for_specific_juz(
        self,
        recitation_id: int,
        juz_number: int,
        query: PaginationQuery | QueryInput = None,
    ) -> AyahRecitationResponse:
        self.require(recitation_id=recitation_id, juz_number=juz_number)
        return await self._fetch(
            endpoints.AYAH_RECITATIONS_BY_JUZ,
            query,
            recitation_id=recitation_id,
            juz_number=juz_number,
        )

    async def get_ayah_recitations_for_specific_madani_mushaf_page(
        self,
        recitation_id: int,
        page_number: int,
        query: PaginationQuery | QueryInput = None,
    ) -> AyahRecitationResponse:
        self.require(recitation_id=recitation_id, page_number=page_number)
        return await self._fetch(
            endpoints.AYAH_RECITATIONS_BY_PAGE,
            query,
            recitation_id=recitation_id,
            page_number=page_number,
        )

    async def get_ayah_recitations_for_specific_rub_el_hizb(
        self,
        recitation_id: int,
        rub_el_hizb_number: int,
        query: PaginationQuery | QueryInput = None,
    ) -> AyahRecitationResponse:
        self.require(recitation_id=recitation_id, rub_el_hizb_number=rub_el_hizb_number)
        return await self._fetch(
            endpoints.AYAH_RECITATIONS_BY_RUB,
            query,
            recitation_id=recitation_id,
            rub_el_hizb_number=rub_el_hizb_number,
        )

    async def get_ayah_recitations_for_specific_hizb(
        self,
        recitation_id: int,
        hizb_number: int,
        query: PaginationQuery | QueryInput = None,
    ) -> AyahRecitationResponse:
        self.require(recitation_id=recitation_id, hizb_number=hizb_number)
        return await self._fetch(
            endpoints.AYAH_RECITATIONS_BY_HIZB,
            query,
            recitation_id=recitation_id,
            hizb_number=hizb_number,
        )

    async def get_ayah_recitations_for_specific_ayah(
        self,
        recitation_id: int,
        ayah_key: str,
        query: PaginationQuery | QueryInput = None,
    ) -> AyahRecitationResponse:
        """Audio de una ayah concreta (`ayah_key` con forma `"2:255"`)."""

        self.require(recitation_id=recitation_id, ayah_key=ayah_key)
        return await self._fetch(
            endpoints.AYAH_RECITATIONS_BY_AYAH,
            query,
            recitation_id=recitation_id,
            ayah_key=ayah_key,
        )
