"""
Tests for the error taxonomy.
"""
import pytest

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


class TestParameterError:
    """Missing-parameter messages."""

    def test_single_missing_parameter(self):
        """One name reads 'X is required'."""
        error = ParameterError.missing(["id"])

        assert str(error) == "id is required"
        assert error.parameters == ("id",)

    def test_several_missing_parameters(self):
        """Several names are joined with 'and'."""
        error = AudioError.missing(["id", "chapter_number"])

        assert str(error) == "id and chapter_number are required"
        assert error.parameters == ("id", "chapter_number")
        assert isinstance(error, AudioError)

    @pytest.mark.parametrize(
        "error_cls", [AudioError, ChapterError, ResourceError, VerseError, QuranTextError]
    )
    def test_module_errors_are_parameter_errors(self, error_cls):
        """Callers can catch every module error as ParameterError."""
        assert issubclass(error_cls, ParameterError)
        assert issubclass(error_cls, QuranContentError)


class TestOtherErrors:
    """Language and payload errors."""

    def test_language_error_keeps_code(self):
        """The rejected code is available on the exception."""
        error = LanguageValidationError("xx")

        assert error.language == "xx"
        assert str(error) == "Provided language is not supported"
        assert not isinstance(error, ParameterError)

    def test_payload_error_context(self):
        """PayloadError renders endpoint and reason as context."""
        error = PayloadError("list_chapters", "1 validation error(s)")

        assert error.endpoint == "list_chapters"
        assert error.context == {"endpoint": "list_chapters", "reason": "1 validation error(s)"}
        assert "endpoint=list_chapters" in str(error)

    def test_base_error_without_context(self):
        """No context means the bare message."""
        assert str(QuranContentError("boom")) == "boom"
