"""VGMdb HTTP client."""

import codecs
import logging
import urllib.request
from typing import Protocol
from urllib.error import HTTPError, URLError

from vgmeta.config import APIConfig
from vgmeta.exceptions import AlbumNotFoundError, APIError
from vgmeta.models.vgmdb import FetchedPage
from vgmeta.utils.url import build_album_url, build_search_url

logger = logging.getLogger(__name__)


class VGMdbProtocol(Protocol):
    """Protocol for VGMdb page clients.

    This protocol enables dependency injection and testing.
    Implement this protocol to create mock clients for testing.
    """

    @property
    def base_url(self) -> str:
        """Site root the client fetches from."""
        ...

    def fetch_album(self, album_id: str) -> FetchedPage:
        """Fetch an album page by ID."""
        ...

    def fetch_search(self, query: str) -> FetchedPage:
        """Fetch the album search page for a query."""
        ...


class VGMdbClient:
    """Production VGMdb client.

    Fetches pages with urllib and maps transport failures onto vgmeta
    exceptions. Implements VGMdbProtocol for type safety. Requests are
    issued once: there is no retry and no caching.
    """

    def __init__(self, config: APIConfig | None = None) -> None:
        """Initialize the client.

        Args:
            config: Optional site configuration. Uses defaults if not provided.
        """
        self._config = config or APIConfig()

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def fetch_album(self, album_id: str) -> FetchedPage:
        """Fetch an album page by ID.

        Args:
            album_id: Numeric VGMdb album ID.

        Returns:
            The fetched page.

        Raises:
            ValueError: If album_id is empty.
            AlbumNotFoundError: If the site has no such album.
            APIError: If the request fails.
        """
        if not album_id or not album_id.strip():
            raise ValueError("album_id cannot be empty")

        url = build_album_url(self._config.base_url, album_id)
        logger.debug("Fetching album: %s", album_id)
        try:
            return self._get(url)
        except HTTPError as e:
            if e.code == 404:
                raise AlbumNotFoundError(f"Album not found: {album_id}") from e
            logger.warning("HTTP error for album %s: %s", album_id, e)
            raise APIError(f"Failed to fetch album: {e}") from e
        except (URLError, OSError) as e:
            logger.warning("Request failed for album %s: %s", album_id, e)
            raise APIError(f"Failed to fetch album: {e}") from e

    def fetch_search(self, query: str) -> FetchedPage:
        """Fetch the album search page for a query.

        The site redirects to the album page when the query has exactly one
        hit; the returned page's URL reflects the redirect.

        Args:
            query: Search query (title or catalog number).

        Returns:
            The fetched page.

        Raises:
            ValueError: If query is empty.
            APIError: If the request fails.
        """
        if not query or not query.strip():
            raise ValueError("query cannot be empty")

        url = build_search_url(self._config.base_url, query)
        logger.debug("Searching albums: %s", query)
        try:
            return self._get(url)
        except (HTTPError, URLError, OSError) as e:
            logger.warning("Request failed for search '%s': %s", query, e)
            raise APIError(f"Search failed: {e}") from e

    def _get(self, url: str) -> FetchedPage:
        request = urllib.request.Request(
            url,
            headers={"User-Agent": self._config.user_agent},
        )
        with urllib.request.urlopen(request, timeout=self._config.timeout) as response:
            charset = _known_charset(response.headers.get_content_charset())
            html = response.read().decode(charset, errors="replace")
            final_url = response.geturl()
        logger.debug("Fetched %s (%d chars)", final_url, len(html))
        return FetchedPage(url=final_url, html=html)


def _known_charset(charset: str | None) -> str:
    """Return a codec name Python can decode with, defaulting to utf-8."""
    if not charset:
        return "utf-8"
    try:
        codecs.lookup(charset)
    except LookupError:
        logger.warning("Unknown response charset %r, decoding as utf-8", charset)
        return "utf-8"
    return charset
