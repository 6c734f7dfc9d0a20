"""Models for raw VGMdb responses.

These are internal models for pages as they come off the wire,
before any markup is parsed.
"""

from pydantic import BaseModel, ConfigDict

__all__ = ["FetchedPage"]


class FetchedPage(BaseModel):
    """A fetched HTML page.

    Attributes:
        url: Final URL after redirects.
        html: Decoded page markup.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    html: str
