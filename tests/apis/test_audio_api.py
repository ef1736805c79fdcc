"""
Tests for AudioApi.
"""
import pytest

from quran_content.apis import AudioApi
from quran_content.core.domain.models import LanguageListResponse
from quran_content.core.domain.queries import AudioQuery, PaginationQuery
from quran_content.core.errors import AudioError, LanguageValidationError


class TestChapterAudio:
    """Chapter-level recitations."""

    @pytest.mark.asyncio
    async def test_chapter_audio_of_reciter(self, stub_dispatcher):
        """Reciter and chapter go in the path."""
        dispatcher = stub_dispatcher(
            {
                "audio_file": {
                    "id": 43,
                    "chapter_id": 1,
                    "file_size": 710784,
                    "format": "mp3",
                    "audio_url": "https://download.quranicaudio.com/qdc/abdul_baset/mujawwad/1.mp3",
                }
            }
        )

        result = await AudioApi(dispatcher).get_chapters_audio_of_a_reciter(2, 1)

        assert dispatcher.paths == ["/chapter_recitations/2/1"]
        assert result.audio_file.format == "mp3"

    @pytest.mark.asyncio
    async def test_both_ids_missing(self, stub_dispatcher):
        """Every missing parameter is named in one error."""
        dispatcher = stub_dispatcher()

        with pytest.raises(AudioError) as exc_info:
            await AudioApi(dispatcher).get_chapters_audio_of_a_reciter(None, 0)

        assert str(exc_info.value) == "id and chapter_number are required"
        assert exc_info.value.parameters == ("id", "chapter_number")
        assert dispatcher.paths == []

    @pytest.mark.asyncio
    async def test_all_chapters_of_reciter(self, stub_dispatcher):
        """All chapter files of a reciter."""
        dispatcher = stub_dispatcher({"audio_files": [{"id": 1, "chapter_id": 1}, {"id": 2, "chapter_id": 2}]})

        result = await AudioApi(dispatcher).get_all_chapters_audio_of_a_reciter(7)

        assert dispatcher.paths == ["/chapter_recitations/7"]
        assert [f.chapter_id for f in result.audio_files] == [1, 2]

    @pytest.mark.asyncio
    async def test_chapter_reciters(self, stub_dispatcher):
        """Reciters are listed per language."""
        dispatcher = stub_dispatcher({"reciters": [{"id": 1, "name": "AbdulBaset AbdulSamad", "format": "mp3"}]})

        result = await AudioApi(dispatcher).get_list_of_chapter_reciters("en")

        assert dispatcher.paths == ["/resources/chapter_reciters?language=en"]
        assert result.reciters[0].name == "AbdulBaset AbdulSamad"

    @pytest.mark.asyncio
    async def test_chapter_reciters_bad_language(self, stub_dispatcher):
        """Language is validated before the request."""
        dispatcher = stub_dispatcher()

        with pytest.raises(LanguageValidationError):
            await AudioApi(dispatcher).get_list_of_chapter_reciters("xx")

        assert dispatcher.paths == []


class TestRecitations:
    """Recitation catalogue and ayah audio files."""

    @pytest.mark.asyncio
    async def test_recitations_by_language(self, stub_dispatcher):
        """Hits /resources/languages with the language query."""
        dispatcher = stub_dispatcher({"languages": [{"id": 38, "iso_code": "en", "name": "English"}]})

        result = await AudioApi(dispatcher).get_recitations()

        assert dispatcher.paths == ["/resources/languages?language=en"]
        assert isinstance(result, LanguageListResponse)
        assert result.languages[0].iso_code == "en"

    @pytest.mark.asyncio
    async def test_audio_files_only_sends_set_filters(self, stub_dispatcher):
        """Only filters with a value are encoded."""
        dispatcher = stub_dispatcher(
            {
                "audio_files": [{"verse_key": "2:6", "url": "AbdulBaset/Mujawwad/mp3/002006.mp3"}],
                "meta": {"reciter_name": "AbdulBaset AbdulSamad", "recitation_style": "Mujawwad"},
            }
        )

        result = await AudioApi(dispatcher).get_all_audio_files_of_a_recitation(1, AudioQuery(page_number=10))

        assert dispatcher.paths == ["/quran/recitations/1?page_number=10"]
        assert result.audio_files[0].verse_key == "2:6"
        assert result.meta.recitation_style == "Mujawwad"

    @pytest.mark.asyncio
    async def test_audio_files_mapping_drops_blank(self, stub_dispatcher):
        """Blank mapping values are skipped."""
        dispatcher = stub_dispatcher({"audio_files": []})

        await AudioApi(dispatcher).get_all_audio_files_of_a_recitation(
            1, {"chapter_number": 1, "verse_key": None, "fields": ""}
        )

        assert dispatcher.paths == ["/quran/recitations/1?chapter_number=1"]

    @pytest.mark.asyncio
    async def test_audio_files_missing_recitation(self, stub_dispatcher):
        """recitation_id is required."""
        with pytest.raises(AudioError, match="recitation_id is required"):
            await AudioApi(stub_dispatcher()).get_all_audio_files_of_a_recitation(None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, unit, expected",
        [
            ("get_ayah_recitations_for_specific_surah", 1, "/recitations/7/by_chapter/1"),
            ("get_ayah_recitations_for_specific_juz", 30, "/recitations/7/by_juz/30"),
            ("get_ayah_recitations_for_specific_madani_mushaf_page", 604, "/recitations/7/by_page/604"),
            ("get_ayah_recitations_for_specific_rub_el_hizb", 240, "/recitations/7/by_rub/240"),
            ("get_ayah_recitations_for_specific_hizb", 60, "/recitations/7/by_hizb/60"),
            ("get_ayah_recitations_for_specific_ayah", "1:1", "/recitations/7/by_ayah/1:1"),
        ],
    )
    async def test_ayah_recitation_paths(self, stub_dispatcher, method, unit, expected):
        """Each unit uses its own path segment."""
        dispatcher = stub_dispatcher({"audio_files": []})

        await getattr(AudioApi(dispatcher), method)(7, unit)

        assert dispatcher.paths == [expected]

    @pytest.mark.asyncio
    async def test_ayah_recitations_paginated(self, stub_dispatcher):
        """Pagination is passed through the query."""
        dispatcher = stub_dispatcher({"audio_files": [], "pagination": {"per_page": 5, "total_records": 7}})

        result = await AudioApi(dispatcher).get_ayah_recitations_for_specific_surah(
            7, 1, PaginationQuery(page=2, per_page=5)
        )

        assert dispatcher.paths == ["/recitations/7/by_chapter/1?page=2&per_page=5"]
        assert result.pagination.total_records == 7

    @pytest.mark.asyncio
    async def test_ayah_recitations_missing_unit(self, stub_dispatcher):
        """The unit number is required."""
        with pytest.raises(AudioError) as exc_info:
            await AudioApi(stub_dispatcher()).get_ayah_recitations_for_specific_juz(7, None)

        assert exc_info.value.parameters == ("juz_number",)
