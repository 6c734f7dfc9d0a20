"""Data models for vgmeta.

Public API:
    AlbumRecord - Full album detail (title, catalog, release date, discs)
    AlbumSummary - Album as listed in search results
    Disc, Track - Track listing
    MultiLanguageString - Text keyed by language
    SearchResponse, SearchResultKind - Album search outcome

Internal (not exported):
    vgmdb.py - Raw fetched pages
"""

from vgmeta.models.domain import (
    AlbumRecord,
    AlbumSummary,
    Disc,
    MultiLanguageString,
    SearchResponse,
    Track,
)
from vgmeta.models.enums import SearchResultKind

__all__ = [
    "AlbumRecord",
    "AlbumSummary",
    "Disc",
    "MultiLanguageString",
    "SearchResponse",
    "SearchResultKind",
    "Track",
]
