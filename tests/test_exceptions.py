"""Tests for exceptions."""

import pytest
from vgmeta.exceptions import (
    AlbumIdParseError,
    AlbumNotFoundError,
    APIError,
    InvalidDateError,
    MissingFieldError,
    MissingStructureError,
    ParseError,
    UnresolvedLanguageError,
    VGMetaError,
)


class TestExceptionStatusCodes:
    """Tests for HTTP status codes on exceptions."""

    @pytest.mark.parametrize(
        ("exception_class", "expected_status"),
        [
            (VGMetaError, 500),
            (ParseError, 422),
            (InvalidDateError, 422),
            (MissingFieldError, 422),
            (MissingStructureError, 422),
            (UnresolvedLanguageError, 422),
            (AlbumIdParseError, 400),
            (AlbumNotFoundError, 404),
            (APIError, 502),
        ],
        ids=[
            "base_error",
            "parse_error",
            "invalid_date",
            "missing_field",
            "missing_structure",
            "unresolved_language",
            "album_id",
            "not_found",
            "api_error",
        ],
    )
    def test_exception_status_codes(
        self, exception_class: type[VGMetaError], expected_status: int
    ) -> None:
        """Each exception type should have the correct HTTP status code."""
        error = exception_class("test message")
        assert error.status_code == expected_status


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "exception_class",
        [
            InvalidDateError,
            MissingFieldError,
            MissingStructureError,
            UnresolvedLanguageError,
        ],
    )
    def test_markup_errors_are_parse_errors(
        self, exception_class: type[VGMetaError]
    ) -> None:
        assert issubclass(exception_class, ParseError)

    @pytest.mark.parametrize(
        "exception_class",
        [ParseError, AlbumIdParseError, AlbumNotFoundError, APIError],
    )
    def test_catch_all_with_base_class(
        self, exception_class: type[VGMetaError]
    ) -> None:
        """Should be able to catch all errors with VGMetaError."""
        with pytest.raises(VGMetaError) as exc_info:
            raise exception_class("test message")
        assert exc_info.value.message == "test message"

    def test_exception_message_attribute(self) -> None:
        error = VGMetaError("test message")
        assert error.message == "test message"
        assert str(error) == "test message"
