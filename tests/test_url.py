"""Tests for URL utilities."""

import pytest
from vgmeta.exceptions import AlbumIdParseError
from vgmeta.utils.url import (
    build_album_url,
    build_search_url,
    is_album_url,
    parse_album_id,
)


class TestParseAlbumId:
    """Tests for parse_album_id."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("79", "79"),
            (" 79 ", "79"),
            ("https://vgmdb.net/album/79", "79"),
            ("https://vgmdb.net/album/79/", "79"),
            ("http://vgmdb.net/album/12345?lang=en", "12345"),
            ("/album/60002", "60002"),
        ],
    )
    def test_valid_values(self, value: str, expected: str) -> None:
        assert parse_album_id(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "abc",
            "https://vgmdb.net/artist/79",
            "https://vgmdb.net/album/",
            "https://vgmdb.net/album/79/tracks",
            "1" * 2100,
        ],
    )
    def test_invalid_values_raise(self, value: str) -> None:
        with pytest.raises(AlbumIdParseError):
            parse_album_id(value)


class TestIsAlbumUrl:
    """Tests for is_album_url."""

    def test_album_url(self) -> None:
        assert is_album_url("https://vgmdb.net/album/79")

    def test_search_url(self) -> None:
        assert not is_album_url("https://vgmdb.net/search?type=album&q=album")

    def test_empty(self) -> None:
        assert not is_album_url("")


class TestBuildUrls:
    """Tests for URL builders."""

    def test_album_url(self) -> None:
        assert build_album_url("https://vgmdb.net/", "79") == (
            "https://vgmdb.net/album/79"
        )

    def test_search_url_encodes_query(self) -> None:
        assert build_search_url("https://vgmdb.net", "Final Fantasy & X") == (
            "https://vgmdb.net/search?type=album&q=Final+Fantasy+%26+X"
        )
