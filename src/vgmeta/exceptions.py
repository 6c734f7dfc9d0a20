"""Custom exceptions for vgmeta.

All exceptions include an HTTP status_code attribute for easy
integration with web frameworks like FastAPI.
"""


class VGMetaError(Exception):
    """Base exception for vgmeta.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ParseError(VGMetaError):
    """Album page markup did not match the expected structure.

    Base class for every error raised while reading a fetched page.
    These are never retried: the markup itself is wrong, not the transport.
    """

    status_code: int = 422  # Unprocessable Entity


class InvalidDateError(ParseError):
    """Release date text could not be normalized.

    Raised for an unrecognized month token or empty date text.
    """


class MissingFieldError(ParseError):
    """A mandatory field is absent from the album info table.

    Raised when no row of the table yields a release date.
    """


class MissingStructureError(ParseError):
    """A required page region is absent.

    Raised when the info table, track list navigation, track list,
    or a disc's track table cannot be located.
    """


class UnresolvedLanguageError(ParseError):
    """A track list panel has no matching navigation entry.

    Raised when a panel's reference token is not linked from the
    track list navigation, so its language label is unknown.
    """


class AlbumIdParseError(VGMetaError):
    """Failed to parse an album ID or URL.

    Raised when the value is neither a numeric ID nor an album URL.
    """

    status_code: int = 400  # Bad Request


class AlbumNotFoundError(VGMetaError):
    """Album not found.

    Raised when the site returns 404 for an album, or when a search
    response has no album at the requested index.
    """

    status_code: int = 404  # Not Found


class APIError(VGMetaError):
    """VGMdb request error.

    Raised when the underlying HTTP request fails.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)
