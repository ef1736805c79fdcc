"""quran-content: cliente tipado y asíncrono para la API de contenido de Quran.com.

Uso:
    from quran_content import QuranClient

    async with QuranClient() as client:
        chapters = await client.chapter.list_chapters("en")
        audio = await client.audio.get_chapters_audio_of_a_reciter(2, 1)
"""

__version__ = "0.1.0"

from quran_content._logging import configure_logging, disable_logging, get_logger
from quran_content.adapters.dispatcher import RequestDispatcher
from quran_content.client import QuranClient
from quran_content.core.config import ClientSettings
from quran_content.core.domain.language import (
    ALLOWED_LANGUAGES,
    DEFAULT_LANGUAGE,
    ensure_supported,
    is_supported,
)
from quran_content.core.domain.queries import (
    AudioQuery,
    LanguageQuery,
    PaginationQuery,
    QuranTextQuery,
    TranslationQuery,
    VerseQuery,
)
from quran_content.core.errors import (
    AudioError,
    ChapterError,
    LanguageValidationError,
    ParameterError,
    PayloadError,
    QuranContentError,
    QuranTextError,
    ResourceError,
    VerseError,
)

__all__ = [
    # Version
    "__version__",
    # Client
    "QuranClient",
    "RequestDispatcher",
    "ClientSettings",
    # Languages
    "ALLOWED_LANGUAGES",
    "DEFAULT_LANGUAGE",
    "ensure_supported",
    "is_supported",
    # Queries
    "AudioQuery",
    "LanguageQuery",
    "PaginationQuery",
    "QuranTextQuery",
    "TranslationQuery",
    "VerseQuery",
    # Logging
    "configure_logging",
    "disable_logging",
    "get_logger",
    # Exceptions
    "QuranContentError",
    "ParameterError",
    "AudioError",
    "ChapterError",
    "ResourceError",
    "VerseError",
    "QuranTextError",
    "LanguageValidationError",
    "PayloadError",
]
