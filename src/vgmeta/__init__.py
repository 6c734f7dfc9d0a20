"""vgmeta - Extract album metadata from VGMdb.

This library turns VGMdb album pages into structured records: a
multi-language title, catalog number, partial release date and a disc
listing where every track carries one name per display language.

Designed for use as a library in applications with a CLI for debugging
and development.

Examples:
    Fetch an album:
    ```python
    from vgmeta import create_extractor

    extractor = create_extractor()
    album = extractor.get_album("79")
    print(album.display_title, album.release_date)
    for disc in album.discs:
        for track in disc.tracks:
            print(track.name.languages, track.display_name)
    ```

    Parse a page you already have:
    ```python
    from vgmeta import assemble_album

    album = assemble_album(html, link="https://vgmdb.net/album/79")
    ```
"""

from vgmeta.client import VGMdbClient, VGMdbProtocol
from vgmeta.config import APIConfig
from vgmeta.exceptions import (
    AlbumIdParseError,
    AlbumNotFoundError,
    APIError,
    InvalidDateError,
    MissingFieldError,
    MissingStructureError,
    ParseError,
    UnresolvedLanguageError,
    VGMetaError,
)
from vgmeta.lib.album import assemble_album
from vgmeta.models.domain import (
    AlbumRecord,
    AlbumSummary,
    Disc,
    MultiLanguageString,
    SearchResponse,
    Track,
)
from vgmeta.models.enums import SearchResultKind
from vgmeta.services import AlbumExtractorService
from vgmeta.utils.dates import normalize_date


def create_extractor(config: APIConfig | None = None) -> AlbumExtractorService:
    """Create a configured album extractor.

    This is the recommended way to create an extractor for library usage.
    It handles client instantiation internally.

    Args:
        config: Optional site configuration. Uses defaults if not provided.

    Returns:
        A configured AlbumExtractorService instance.

    Examples:
        Against a mirror:
        ```python
        extractor = create_extractor(APIConfig(base_url="http://localhost:8080"))
        ```
    """
    client = VGMdbClient(config=config)
    return AlbumExtractorService(client)


__all__ = [
    "APIConfig",
    "APIError",
    "AlbumExtractorService",
    "AlbumIdParseError",
    "AlbumNotFoundError",
    "AlbumRecord",
    "AlbumSummary",
    "Disc",
    "InvalidDateError",
    "MissingFieldError",
    "MissingStructureError",
    "MultiLanguageString",
    "ParseError",
    "SearchResponse",
    "SearchResultKind",
    "Track",
    "UnresolvedLanguageError",
    "VGMdbClient",
    "VGMdbProtocol",
    "VGMetaError",
    "assemble_album",
    "create_extractor",
    "normalize_date",
]
