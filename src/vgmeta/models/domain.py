"""Domain models for vgmeta.

These are the public models that represent the output of the library.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, RootModel, model_validator

from vgmeta.models.enums import SearchResultKind

# Fixed priority used to pick "the" display value of a multi-language string.
LANGUAGE_PRIORITY = ("ja", "Japanese", "English")


class MultiLanguageString(RootModel[dict[str, str]]):
    """Text keyed by language tag (e.g. ``"ja"``, ``"English"``).

    Example:
        >>> name = MultiLanguageString({"English": "Title", "ja": "タイトル"})
        >>> name.get()
        'タイトル'
    """

    model_config = ConfigDict(frozen=True)

    root: dict[str, str] = {}

    def get(self) -> str | None:
        """Resolve the display value.

        Tries ``ja``, then ``Japanese``, then ``English``, then the first
        entry. Returns None if the string has no entries.
        """
        for language in LANGUAGE_PRIORITY:
            if language in self.root:
                return self.root[language]
        return next(iter(self.root.values()), None)

    @property
    def languages(self) -> list[str]:
        """Language tags present in this string."""
        return list(self.root)

    def __getitem__(self, language: str) -> str:
        return self.root[language]

    def __contains__(self, language: object) -> bool:
        return language in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __bool__(self) -> bool:
        return bool(self.root)


class Track(BaseModel):
    """A single track, named once per language panel."""

    model_config = ConfigDict(frozen=True)

    name: MultiLanguageString

    @property
    def display_name(self) -> str:
        """Preferred track name, or an empty string if unnamed."""
        return self.name.get() or ""


class Disc(BaseModel):
    """A disc of an album.

    Attributes:
        title: Disc title from the first language panel (e.g. "Disc 1").
        tracks: Tracks in listing order. Position is the only key that
            correlates tracks across language panels.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    tracks: list[Track] = []


class AlbumSummary(BaseModel):
    """Album summary as listed in search results.

    Attributes:
        id: Numeric VGMdb album ID (as a string), empty if unknown.
        link: Album page URL, empty if unknown.
        title: Multi-language album title.
        catalog: Catalog number, None when the site lists "N/A".
        release_date: Partial date (YYYY-MM-DD, YYYY-MM or YYYY).
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    link: str = ""
    title: MultiLanguageString = MultiLanguageString()
    catalog: str | None = None
    release_date: str

    @property
    def display_title(self) -> str:
        """Preferred title, or an empty string if untitled."""
        return self.title.get() or ""


class AlbumRecord(BaseModel):
    """Full album detail assembled from an album page."""

    model_config = ConfigDict(frozen=True)

    link: str = ""
    info: AlbumSummary
    discs: list[Disc] = []

    @property
    def id(self) -> str:
        return self.info.id

    @property
    def title(self) -> MultiLanguageString:
        return self.info.title

    @property
    def display_title(self) -> str:
        return self.info.display_title

    @property
    def catalog(self) -> str | None:
        return self.info.catalog

    @property
    def release_date(self) -> str:
        return self.info.release_date

    @property
    def track_count(self) -> int:
        """Total tracks across all discs."""
        return sum(len(disc.tracks) for disc in self.discs)


class SearchResponse(BaseModel):
    """Result of an album search.

    Exactly one of ``album`` (search redirected to an album page) or
    ``results`` (a listing page) carries data.
    """

    model_config = ConfigDict(frozen=True)

    query: str
    album: AlbumRecord | None = None
    results: list[AlbumSummary] = []

    @model_validator(mode="after")
    def _single_shape(self) -> SearchResponse:
        if self.album is not None and self.results:
            raise ValueError("response cannot hold both an album and a listing")
        return self

    @property
    def kind(self) -> SearchResultKind:
        if self.album is not None:
            return SearchResultKind.ALBUM
        return SearchResultKind.LIST

    def albums(self) -> list[AlbumSummary]:
        """Summaries of every album in the response."""
        if self.album is not None:
            return [self.album.info]
        return list(self.results)

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        if self.album is not None:
            return 1
        return len(self.results)
