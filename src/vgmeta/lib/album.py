"""Album page assembly."""

import logging

from bs4 import Tag

from vgmeta.exceptions import AlbumIdParseError
from vgmeta.lib.infobit import extract_album_info, find_info_table
from vgmeta.lib.titles import extract_multi_language
from vgmeta.lib.tracklist import align_track_list
from vgmeta.models.domain import AlbumRecord, AlbumSummary, MultiLanguageString
from vgmeta.utils.markup import as_document
from vgmeta.utils.url import parse_album_id

logger = logging.getLogger(__name__)


def find_title(document: Tag) -> MultiLanguageString:
    """Extract the album title from the page heading.

    A page without a heading yields an empty title instead of failing.
    """
    heading = document.find("h1")
    if not isinstance(heading, Tag):
        logger.debug("Album page has no title heading")
        return MultiLanguageString()
    return extract_multi_language(heading)


def find_canonical_link(document: Tag) -> str:
    """Canonical page URL from ``<link rel="canonical">`` or ``og:url``."""
    link = document.find("link", attrs={"rel": "canonical"})
    if isinstance(link, Tag) and link.get("href"):
        return str(link["href"])
    meta = document.find("meta", attrs={"property": "og:url"})
    if isinstance(meta, Tag) and meta.get("content"):
        return str(meta["content"])
    return ""


def _album_id(link: str) -> str:
    if not link:
        return ""
    try:
        return parse_album_id(link)
    except AlbumIdParseError:
        logger.debug("Link is not an album URL: %s", link)
        return ""


def assemble_album(markup: str | Tag, link: str = "") -> AlbumRecord:
    """Assemble a full album record from an album page.

    Title, info table and track list are each located independently in the
    same document. A missing title degrades to an empty title; every other
    error propagates.

    Args:
        markup: Album page HTML, or an already-parsed document.
        link: Page URL. Falls back to the page's canonical link.

    Returns:
        The assembled album.

    Raises:
        MissingStructureError: If the info table or track list is missing.
        MissingFieldError: If the release date is missing.
        InvalidDateError: If the release date cannot be parsed.
        UnresolvedLanguageError: If a track list panel has no language.
    """
    document = as_document(markup)

    title = find_title(document)
    fields = extract_album_info(find_info_table(document))
    discs = align_track_list(document)

    link = link or find_canonical_link(document)
    info = AlbumSummary(
        id=_album_id(link),
        link=link,
        title=title,
        catalog=fields.catalog,
        release_date=fields.release_date,
    )
    return AlbumRecord(link=link, info=info, discs=discs)
