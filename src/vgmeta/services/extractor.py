"""Album extraction service."""

import logging

from vgmeta.client import VGMdbProtocol
from vgmeta.exceptions import AlbumNotFoundError
from vgmeta.lib.album import assemble_album
from vgmeta.lib.search import parse_search_results
from vgmeta.models.domain import AlbumRecord, SearchResponse
from vgmeta.utils.url import is_album_url, parse_album_id

logger = logging.getLogger(__name__)


class AlbumExtractorService:
    """Service for extracting album metadata from VGMdb.

    Fetching goes through the injected client; everything else is parsing
    of the fetched markup, which is pure and safe to run concurrently on
    separate pages.
    """

    def __init__(self, client: VGMdbProtocol) -> None:
        """Initialize the service.

        Args:
            client: VGMdb client for fetching album and search pages.
        """
        self._client = client

    def get_album(self, album: str) -> AlbumRecord:
        """Fetch and assemble an album.

        Args:
            album: Numeric album ID or album URL.

        Returns:
            The assembled album.

        Raises:
            AlbumIdParseError: If ``album`` is not an ID or album URL.
            AlbumNotFoundError: If the album does not exist.
            APIError: If the request fails.
            ParseError: If the page cannot be parsed.
        """
        album_id = parse_album_id(album)
        page = self._client.fetch_album(album_id)
        return assemble_album(page.html, link=page.url)

    def search(self, query: str) -> SearchResponse:
        """Search albums.

        A query with a single hit is redirected by the site to the album
        page, in which case the response holds the full album.

        Raises:
            APIError: If the request fails.
            ParseError: If the page cannot be parsed.
        """
        page = self._client.fetch_search(query)
        if is_album_url(page.url):
            logger.debug("Search redirected to album: %s", page.url)
            return SearchResponse(
                query=query, album=assemble_album(page.html, link=page.url)
            )

        results = parse_search_results(page.html, base_url=self._client.base_url)
        logger.debug("Search '%s' returned %d album(s)", query, len(results))
        return SearchResponse(query=query, results=results)

    def resolve(self, response: SearchResponse, index: int = 0) -> AlbumRecord:
        """Turn a search response into a full album.

        Args:
            response: Response from search().
            index: Which listed album to fetch. Ignored when the response
                already holds an album.

        Returns:
            The assembled album.

        Raises:
            AlbumNotFoundError: If there is no album at ``index``.
        """
        if response.album is not None:
            return response.album
        if not 0 <= index < len(response.results):
            raise AlbumNotFoundError(
                f"No album at index {index} for search: {response.query}"
            )
        summary = response.results[index]
        return self.get_album(summary.id or summary.link)

    def parse(self, markup: str, link: str = "") -> AlbumRecord:
        """Assemble an album from already-fetched markup."""
        return assemble_album(markup, link=link)
