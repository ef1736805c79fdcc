"""Fachada: un dispatcher compartido y una instancia de cada API de dominio.

Uso:

    async with QuranClient() as client:
        chapters = await client.chapter.list_chapters("en")
        verses = await client.verse.get_verse_by_chapter(1, {"per_page": 10})

Ojo: respuestas 4xx del upstream no lanzan excepción; llegan como payload con
`status`/`error` poblados. Revisar `payload.is_error`.
"""

from __future__ import annotations

from types import TracebackType

import httpx

from quran_content.adapters.dispatcher import RequestDispatcher
from quran_content.apis import AudioApi, ChapterApi, JuzApi, QuranTextApi, ResourceApi, VerseApi
from quran_content.core.config import ClientSettings
from quran_content.core.interfaces.dispatcher import Dispatcher


class QuranClient:
    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        token: str | None = None,
        extra_headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        self._dispatcher: Dispatcher = dispatcher or RequestDispatcher(
            settings,
            token=token,
            extra_headers=extra_headers,
            transport=transport,
        )
        self.audio = AudioApi(self._dispatcher)
        self.chapter = ChapterApi(self._dispatcher)
        self.juz = JuzApi(self._dispatcher)
        self.resource = ResourceApi(self._dispatcher)
        self.verse = VerseApi(self._dispatcher)
        self.quran = QuranTextApi(self._dispatcher)

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    async def aclose(self) -> None:
        if isinstance(self._dispatcher, RequestDispatcher):
            await self._dispatcher.aclose()

    async def __aenter__(self) -> "QuranClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
