"""APIs de dominio (una clase por grupo de endpoints).

Cada clase recibe un `Dispatcher` y expone una corrutina por endpoint.
"""

from quran_content.apis.audio import AudioApi
from quran_content.apis.chapter import ChapterApi
from quran_content.apis.juz import JuzApi
from quran_content.apis.quran import QuranTextApi
from quran_content.apis.resource import ResourceApi
from quran_content.apis.verse import VerseApi

__all__ = [
    "AudioApi",
    "ChapterApi",
    "JuzApi",
    "QuranTextApi",
    "ResourceApi",
    "VerseApi",
]
