"""URL parsing utilities."""

import re
from urllib.parse import urlencode, urlparse

from vgmeta.exceptions import AlbumIdParseError

ALBUM_ID_PATTERN = re.compile(r"^\d+$")
_ALBUM_PATH_PATTERN = re.compile(r"^/album/(\d+)/?$")

# Maximum URL length to prevent potential abuse (standard browser limit)
MAX_URL_LENGTH = 2048


def parse_album_id(value: str) -> str:
    """Extract the album ID from a numeric ID or an album URL.

    Args:
        value: Either "79" or a URL such as "https://vgmdb.net/album/79".

    Returns:
        The album ID string.

    Raises:
        AlbumIdParseError: If no album ID can be extracted.
    """
    value = (value or "").strip()
    if not value or len(value) > MAX_URL_LENGTH:
        raise AlbumIdParseError(f"Could not extract album ID from: {value}")
    if ALBUM_ID_PATTERN.match(value):
        return value
    if match := _ALBUM_PATH_PATTERN.match(urlparse(value).path):
        return match.group(1)
    raise AlbumIdParseError(f"Could not extract album ID from: {value}")


def is_album_url(url: str) -> bool:
    """Check if a URL points at an album page."""
    if not url or len(url) > MAX_URL_LENGTH:
        return False
    return urlparse(url).path.startswith("/album")


def build_album_url(base_url: str, album_id: str) -> str:
    """Build the album page URL for an ID."""
    return f"{base_url.rstrip('/')}/album/{album_id}"


def build_search_url(base_url: str, query: str) -> str:
    """Build the album search URL for a query."""
    params = urlencode({"type": "album", "q": query})
    return f"{base_url.rstrip('/')}/search?{params}"
