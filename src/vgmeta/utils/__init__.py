"""Utility functions for vgmeta.

Available via `from vgmeta.utils import ...` for power users.
Not re-exported at the top-level `vgmeta` package.
"""

from vgmeta.utils.dates import normalize_date, parse_month
from vgmeta.utils.markup import as_document, child_elements
from vgmeta.utils.url import (
    build_album_url,
    build_search_url,
    is_album_url,
    parse_album_id,
)

__all__ = [
    "as_document",
    "build_album_url",
    "build_search_url",
    "child_elements",
    "is_album_url",
    "normalize_date",
    "parse_album_id",
    "parse_month",
]
