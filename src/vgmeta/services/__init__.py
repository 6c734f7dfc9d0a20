"""Business logic services for vgmeta.

Public API:
    AlbumExtractorService - Fetch, search and assemble VGMdb albums
"""

from vgmeta.services.extractor import AlbumExtractorService

__all__ = ["AlbumExtractorService"]
