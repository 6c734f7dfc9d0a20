"""Helpers for working with parsed HTML."""

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

# stdlib backend; the site's markup does not need lxml's recovery
HTML_PARSER = "html.parser"


def as_document(markup: str | Tag) -> Tag:
    """Parse markup, or pass an already-parsed tree through unchanged."""
    if isinstance(markup, Tag):
        return markup
    return BeautifulSoup(markup, HTML_PARSER)


def child_elements(node: Tag) -> list[Tag]:
    """Direct element children of a node, in document order."""
    return [child for child in node.children if isinstance(child, Tag)]


def is_text(node: object) -> bool:
    """Whether a node is visible text (not a comment, CDATA or doctype)."""
    return isinstance(node, NavigableString) and not isinstance(
        node, PreformattedString
    )
