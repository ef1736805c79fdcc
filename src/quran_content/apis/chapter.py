"""Capítulos (surahs)."""

from __future__ import annotations

from quran_content.apis.base import BaseApi
from quran_content.core import endpoints
from quran_content.core.domain.language import DEFAULT_LANGUAGE, ensure_supported
from quran_content.core.domain.models import (
    ChapterInfoResponse,
    ChapterListResponse,
    ChapterResponse,
)
from quran_content.core.domain.queries import LanguageQuery
from quran_content.core.errors import ChapterError


class ChapterApi(BaseApi):
    error_cls = ChapterError

    async def list_chapters(self, language: str = DEFAULT_LANGUAGE) -> ChapterListResponse:
        """Los 114 capítulos, con nombres traducidos a `language`."""

        language = ensure_supported(language)
        return await self._fetch(endpoints.LIST_CHAPTERS, LanguageQuery(language=language))

    async def get_chapter(self, id: int, language: str = DEFAULT_LANGUAGE) -> ChapterResponse:
        self.require(id=id)
        language = ensure_supported(language)
        return await self._fetch(endpoints.GET_CHAPTER, LanguageQuery(language=language), id=id)

    async def get_chapter_info(
        self, chapter_id: int, language: str = DEFAULT_LANGUAGE
    ) -> ChapterInfoResponse:
        """Texto introductorio del capítulo (contexto, nombre, revelación)."""

        self.require(chapter_id=chapter_id)
        language = ensure_supported(language)
        return await self._fetch(
            endpoints.CHAPTER_INFO, LanguageQuery(language=language), chapter_id=chapter_id
        )
