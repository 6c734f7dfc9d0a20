"""Test fixtures and configuration."""

import pytest
from vgmeta.models.vgmdb import FetchedPage

from pages import album_page, search_page, search_row


@pytest.fixture
def minimal_album_html() -> str:
    """One title, one info table, one panel with one disc of two tracks."""
    return album_page(
        titles={"ja": "テスト"},
        info_rows=[("Catalog Number", "XYZ-001"), ("Release Date", "Jan 5, 2020")],
        panels=[("tl1", "Japanese", [("Disc 1", ["A", "B"])])],
    )


@pytest.fixture
def bilingual_album_html() -> str:
    """Two language panels with matching disc and track counts."""
    return album_page(
        titles={"en": "Test Album", "ja": "テストアルバム"},
        info_rows=[
            ("Catalog Number", "SQEX-10001"),
            ("Release Date", "Aug 13, 2006"),
            ("Publish Format", "Commercial"),
        ],
        panels=[
            (
                "tl1",
                "English",
                [("Disc 1", ["Opening", "Battle"]), ("Disc 2", ["Ending"])],
            ),
            (
                "tl2",
                "Japanese",
                [("ディスク1", ["オープニング", "バトル"]), ("ディスク2", ["エンディング"])],
            ),
        ],
    )


@pytest.fixture
def search_listing_html() -> str:
    """Search listing with two results."""
    return search_page(
        [
            search_row(
                "BNEI-ML-1001",
                {"en": "Million Live 01", "ja": "ミリオンライブ 01"},
                "https://vgmdb.net/album/60001",
                "Jul 12, 2016",
            ),
            search_row("N/A", {"en": "Unreleased Demo"}, "/album/60002", "2017"),
        ]
    )


class MockVGMdbClient:
    """Mock VGMdb client for testing."""

    def __init__(
        self,
        albums: dict[str, FetchedPage] | None = None,
        search: FetchedPage | None = None,
        base_url: str = "https://vgmdb.net",
    ) -> None:
        self._albums = albums or {}
        self._search = search
        self._base_url = base_url
        self.fetch_album_calls: list[str] = []
        self.fetch_search_calls: list[str] = []

    @property
    def base_url(self) -> str:
        return self._base_url

    def fetch_album(self, album_id: str) -> FetchedPage:
        """Mock fetch_album."""
        self.fetch_album_calls.append(album_id)
        if album_id not in self._albums:
            raise ValueError(f"No album configured for {album_id}")
        return self._albums[album_id]

    def fetch_search(self, query: str) -> FetchedPage:
        """Mock fetch_search."""
        self.fetch_search_calls.append(query)
        if self._search is None:
            raise ValueError("No search page configured")
        return self._search


@pytest.fixture
def mock_client(
    bilingual_album_html: str, search_listing_html: str
) -> MockVGMdbClient:
    """Create a mock client with one album and a two-result listing."""
    return MockVGMdbClient(
        albums={
            "60001": FetchedPage(
                url="https://vgmdb.net/album/60001", html=bilingual_album_html
            )
        },
        search=FetchedPage(
            url="https://vgmdb.net/search?type=album&q=BNEI-ML",
            html=search_listing_html,
        ),
    )


@pytest.fixture
def make_client() -> type[MockVGMdbClient]:
    """Expose the mock client class for tests that need custom pages."""
    return MockVGMdbClient
