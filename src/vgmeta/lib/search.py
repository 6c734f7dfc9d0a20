"""Search result listing extraction."""

import logging
from urllib.parse import urljoin

from bs4 import Tag

from vgmeta.exceptions import AlbumIdParseError, MissingStructureError
from vgmeta.lib.infobit import NOT_AVAILABLE
from vgmeta.lib.titles import extract_multi_language
from vgmeta.models.domain import AlbumSummary
from vgmeta.utils.dates import normalize_date
from vgmeta.utils.markup import as_document
from vgmeta.utils.url import parse_album_id

logger = logging.getLogger(__name__)

RESULT_ROW_SELECTOR = '#albumresults tr[rel="rel_invalid"]'

# Cell positions within a result row
_CATALOG_CELL = 0
_TITLE_CELL = 2
_DATE_CELL = 3


def _parse_row(row: Tag, base_url: str) -> AlbumSummary:
    cells = row.find_all("td")
    if len(cells) <= _DATE_CELL:
        raise MissingStructureError(
            f"Search result row has {len(cells)} cells, expected {_DATE_CELL + 1}"
        )

    catalog = cells[_CATALOG_CELL].get_text().strip()
    title_cell = cells[_TITLE_CELL]
    anchor = title_cell.find("a", href=True)
    if not isinstance(anchor, Tag):
        raise MissingStructureError("Search result row without an album link")
    link = urljoin(base_url, str(anchor["href"])) if base_url else str(anchor["href"])

    try:
        album_id = parse_album_id(link)
    except AlbumIdParseError:
        logger.debug("Search result link is not an album URL: %s", link)
        album_id = ""

    return AlbumSummary(
        id=album_id,
        link=link,
        title=extract_multi_language(title_cell),
        catalog=None if catalog == NOT_AVAILABLE else catalog,
        release_date=normalize_date(cells[_DATE_CELL].get_text()),
    )


def parse_search_results(markup: str | Tag, base_url: str = "") -> list[AlbumSummary]:
    """Parse an album search listing page.

    A page without a results table yields an empty list.

    Args:
        markup: Search page HTML, or an already-parsed document.
        base_url: Site root used to absolutize relative album links.

    Returns:
        One summary per result row, in listing order.

    Raises:
        InvalidDateError: If a row's release date cannot be parsed.
        MissingStructureError: If a row lacks the expected cells or link.
    """
    document = as_document(markup)
    rows = document.select(RESULT_ROW_SELECTOR)
    results = [_parse_row(row, base_url) for row in rows]
    logger.debug("Parsed %d search result(s)", len(results))
    return results
