"""Release date normalization.

VGMdb prints release dates as free text with varying precision
("Aug 13, 2006", "Jul 2017", "2014"). They are normalized into partial
ISO dates rather than ``datetime.date`` because year-only and month-only
releases are common and must not be padded with invented days.
"""

from vgmeta.exceptions import InvalidDateError

# Case-sensitive. Both abbreviated and full English month names.
_MONTHS: dict[str, int] = {
    "Jan": 1,
    "January": 1,
    "Feb": 2,
    "February": 2,
    "Mar": 3,
    "March": 3,
    "Apr": 4,
    "April": 4,
    "May": 5,
    "Jun": 6,
    "June": 6,
    "Jul": 7,
    "July": 7,
    "Aug": 8,
    "August": 8,
    "Sep": 9,
    "September": 9,
    "Oct": 10,
    "October": 10,
    "Nov": 11,
    "November": 11,
    "Dec": 12,
    "December": 12,
}


def parse_month(token: str) -> int:
    """Map an English month name or abbreviation to 1-12.

    Raises:
        InvalidDateError: If the token is not a known month name.
    """
    try:
        return _MONTHS[token]
    except KeyError:
        raise InvalidDateError(f"Unrecognized month: {token!r}") from None


def normalize_date(text: str) -> str:
    """Normalize a release date into ``YYYY-MM-DD``, ``YYYY-MM`` or ``YYYY``.

    Commas are dropped and the text is split on whitespace:

    - three or more tokens are read as ``Month Day Year``; the month is
      zero-padded, a one-digit day is zero-padded, any other day is kept
      verbatim
    - two tokens are read as ``Month Year``
    - a single token is assumed to be a bare year and returned unchanged

    Args:
        text: Date text as shown on the site.

    Returns:
        The partial date string.

    Raises:
        InvalidDateError: If the month is unrecognized or the text is empty.

    Examples:
        >>> normalize_date("Aug 13, 2006")
        '2006-08-13'
        >>> normalize_date("Jul 2017")
        '2017-07'
    """
    parts = text.strip().replace(",", "").split()
    if len(parts) >= 3:
        month, day, year = parts[0], parts[1], parts[2]
        if day.isdigit():
            day = day.zfill(2)
        return f"{year}-{parse_month(month):02d}-{day}"
    if len(parts) == 2:
        month, year = parts
        return f"{year}-{parse_month(month):02d}"
    if len(parts) == 1:
        return parts[0]
    raise InvalidDateError("Empty release date")
