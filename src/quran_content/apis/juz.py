"""Juzs (30 secciones)."""

from __future__ import annotations

from quran_content.apis.base import BaseApi
from quran_content.core import endpoints
from quran_content.core.domain.models import JuzListResponse


class JuzApi(BaseApi):
    async def get_all_juzs(self) -> JuzListResponse:
        return await self._fetch(endpoints.LIST_JUZS)
