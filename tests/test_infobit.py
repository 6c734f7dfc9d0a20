"""Tests for album info table extraction."""

import logging

import pytest
from bs4 import BeautifulSoup, Tag
from vgmeta.exceptions import InvalidDateError, MissingFieldError, MissingStructureError
from vgmeta.lib.infobit import extract_album_info, find_info_table

from pages import info_table


def _table(rows: list[tuple[str, str]]) -> Tag:
    return BeautifulSoup(info_table(rows), "html.parser").table


class TestExtractAlbumInfo:
    """Tests for extract_album_info."""

    def test_reads_catalog_and_release_date(self) -> None:
        fields = extract_album_info(
            _table([("Catalog Number", "XYZ-001"), ("Release Date", "Jan 5, 2020")])
        )
        assert fields.catalog == "XYZ-001"
        assert fields.release_date == "2020-01-05"

    def test_catalog_is_trimmed(self) -> None:
        fields = extract_album_info(
            _table([("Catalog Number", "  SQEX-10001 \n"), ("Release Date", "2006")])
        )
        assert fields.catalog == "SQEX-10001"

    def test_not_available_catalog_is_none(self) -> None:
        fields = extract_album_info(
            _table([("Catalog Number", "N/A"), ("Release Date", "2006")])
        )
        assert fields.catalog is None

    def test_missing_catalog_row_is_none(self) -> None:
        fields = extract_album_info(_table([("Release Date", "Jul 2017")]))
        assert fields.catalog is None
        assert fields.release_date == "2017-07"

    def test_childbrowse_link_is_unwrapped(self) -> None:
        value = (
            'SQEX-10001~3 <span id="childbrowse">'
            '<a href="/album/1">SQEX-10001</a></span>'
        )
        fields = extract_album_info(
            _table([("Catalog Number", value), ("Release Date", "2006")])
        )
        assert fields.catalog == "SQEX-10001"

    def test_release_date_inside_link(self) -> None:
        value = '<a href="/db/calendar.php?year=2006#20060813">Aug 13, 2006</a>'
        fields = extract_album_info(_table([("Release Date", value)]))
        assert fields.release_date == "2006-08-13"

    def test_unrecognized_keys_are_ignored(self) -> None:
        fields = extract_album_info(
            _table(
                [
                    ("Publish Format", "Commercial"),
                    ("Release Date", "2014"),
                    ("Price", "3000 JPY"),
                ]
            )
        )
        assert fields.release_date == "2014"

    def test_rows_without_label_are_ignored(self) -> None:
        table = BeautifulSoup(
            '<table id="album_infobit_large">'
            "<tr><td>Notes</td><td>Something</td></tr>"
            '<tr><td><span class="label"><b>Release Date</b></span></td>'
            "<td>2014</td></tr></table>",
            "html.parser",
        ).table
        assert extract_album_info(table).release_date == "2014"

    def test_last_parseable_release_date_wins(self) -> None:
        fields = extract_album_info(
            _table([("Release Date", "Jan 2001"), ("Release Date", "Feb 2002")])
        )
        assert fields.release_date == "2002-02"

    def test_unparseable_row_does_not_clear_earlier_date(self) -> None:
        fields = extract_album_info(
            _table([("Release Date", "Jan 2001"), ("Release Date", "Soon 2002")])
        )
        assert fields.release_date == "2001-01"

    def test_unparseable_row_is_logged_as_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="vgmeta.lib.infobit"):
            extract_album_info(
                _table([("Release Date", "Jan 2001"), ("Release Date", "Soon 2002")])
            )

        warnings = [r.message for r in caplog.records if r.levelno == logging.WARNING]
        assert any("Soon 2002" in message for message in warnings)

    def test_unparseable_only_release_date_raises_invalid_date(self) -> None:
        with pytest.raises(InvalidDateError):
            extract_album_info(_table([("Release Date", "Xyz 2020")]))

    def test_missing_release_date_raises(self) -> None:
        with pytest.raises(MissingFieldError, match="Release date"):
            extract_album_info(_table([("Catalog Number", "XYZ-001")]))


class TestFindInfoTable:
    """Tests for find_info_table."""

    def test_finds_table_by_id(self) -> None:
        document = BeautifulSoup(
            f"<div>{info_table([('Release Date', '2014')])}</div>", "html.parser"
        )
        assert find_info_table(document).name == "table"

    def test_missing_table_raises(self) -> None:
        document = BeautifulSoup("<div>No info</div>", "html.parser")
        with pytest.raises(MissingStructureError, match="info table"):
            find_info_table(document)
