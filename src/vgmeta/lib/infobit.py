"""Album info table extraction (catalog number and release date)."""

import logging
from dataclasses import dataclass

from bs4 import Tag

from vgmeta.exceptions import InvalidDateError, MissingFieldError, MissingStructureError
from vgmeta.utils.dates import normalize_date
from vgmeta.utils.markup import child_elements

logger = logging.getLogger(__name__)

INFO_TABLE_ID = "album_infobit_large"
CATALOG_KEY = "Catalog Number"
RELEASE_DATE_KEY = "Release Date"
# The site's marker for a field that is intentionally empty
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class AlbumInfoFields:
    """Fields read from the album info table.

    Attributes:
        catalog: Catalog number, None if listed as "N/A" or absent.
        release_date: Normalized partial release date.
    """

    catalog: str | None
    release_date: str


def find_info_table(document: Tag) -> Tag:
    """Locate the album info table.

    Raises:
        MissingStructureError: If the page has no info table.
    """
    table = document.find(id=INFO_TABLE_ID)
    if not isinstance(table, Tag):
        raise MissingStructureError("Album info table not found")
    return table


def _row_value(row: Tag) -> str | None:
    cells = child_elements(row)
    if not cells:
        return None
    cell = cells[-1]
    # Some values are wrapped in a child-browse link
    link = cell.select_one("#childbrowse a")
    source = link if link is not None else cell
    return source.get_text().strip()


def extract_album_info(table: Tag) -> AlbumInfoFields:
    """Read the catalog number and release date from the info table.

    Each row has a bold label (``span.label b``) and its value in the last
    cell. Unrecognized labels are ignored. If "Release Date" appears on
    several rows, the last one that parses wins; a row that fails to parse
    never clears an earlier result.

    Args:
        table: The ``#album_infobit_large`` element.

    Returns:
        The catalog number and release date.

    Raises:
        InvalidDateError: If release dates are present but none parse.
        MissingFieldError: If no row carries a release date.
    """
    catalog: str | None = None
    release_date: str | None = None
    date_error: InvalidDateError | None = None

    for row in table.find_all("tr"):
        label = row.select_one("span.label b")
        if label is None:
            continue
        key = label.get_text().strip()
        if key not in (CATALOG_KEY, RELEASE_DATE_KEY):
            continue
        value = _row_value(row)
        if value is None:
            continue

        if key == CATALOG_KEY:
            catalog = None if value == NOT_AVAILABLE else value
        else:
            try:
                release_date = normalize_date(value)
            except InvalidDateError as e:
                logger.warning("Skipping unparseable release date %r: %s", value, e)
                date_error = e

    if release_date is None:
        if date_error is not None:
            raise date_error
        raise MissingFieldError("Release date not found in album info table")

    return AlbumInfoFields(catalog=catalog, release_date=release_date)
