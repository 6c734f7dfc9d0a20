"""Enumerations for vgmeta domain models."""

from enum import StrEnum


class SearchResultKind(StrEnum):
    """Shape of a search response.

    The site redirects a search with exactly one hit straight to the
    album page, so a response is either a full album or a listing.
    """

    ALBUM = "album"
    LIST = "list"
