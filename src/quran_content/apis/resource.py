"""Recursos: catálogos de traducciones, tafsirs, recitaciones e idiomas."""

from __future__ import annotations

from quran_content.apis.base import BaseApi
from quran_content.core import endpoints
from quran_content.core.domain.language import DEFAULT_LANGUAGE, ensure_supported
from quran_content.core.domain.models import (
    ChapterInfosResponse,
    LanguageListResponse,
    RecitationListResponse,
    RecitationStylesResponse,
    ResourceInfoResponse,
    TafsirListResponse,
    TranslationListResponse,
    VerseMediaResponse,
)
from quran_content.core.domain.queries import LanguageQuery
from quran_content.core.errors import ResourceError


class ResourceApi(BaseApi):
    error_cls = ResourceError

    async def get_recitation_info(self, recitation_id: int | str) -> ResourceInfoResponse:
        self.require(recitation_id=recitation_id)
        return await self._fetch(endpoints.RECITATION_INFO, recitation_id=recitation_id)

    async def get_translation_info(self, translation_id: int | str) -> ResourceInfoResponse:
        self.require(translation_id=translation_id)
        return await self._fetch(endpoints.TRANSLATION_INFO, translation_id=translation_id)

    async def get_tafsir_info(self, tafsir_id: int | str) -> ResourceInfoResponse:
        self.require(tafsir_id=tafsir_id)
        return await self._fetch(endpoints.TAFSIR_INFO, tafsir_id=tafsir_id)

    async def get_translations(self, language: str = DEFAULT_LANGUAGE) -> TranslationListResponse:
        language = ensure_supported(language)
        return await self._fetch(endpoints.TRANSLATIONS, LanguageQuery(language=language))

    async def get_tafsirs(self, language: str = DEFAULT_LANGUAGE) -> TafsirListResponse:
        language = ensure_supported(language)
        return await self._fetch(endpoints.TAFSIRS, LanguageQuery(language=language))

    async def get_recitations(self, language: str = DEFAULT_LANGUAGE) -> RecitationListResponse:
        """Recitaciones por ayah disponibles (ids usados en `AudioApi`)."""

        language = ensure_supported(language)
        return await self._fetch(endpoints.RECITATIONS, LanguageQuery(language=language))

    async def get_recitation_styles(self) -> RecitationStylesResponse:
        return await self._fetch(endpoints.RECITATION_STYLES)

    async def get_languages(self) -> LanguageListResponse:
        return await self._fetch(endpoints.LANGUAGES)

    async def get_chapter_infos(self) -> ChapterInfosResponse:
        return await self._fetch(endpoints.CHAPTER_INFOS)

    async def get_verse_media(self) -> VerseMediaResponse:
        return await self._fetch(endpoints.VERSE_MEDIA)
