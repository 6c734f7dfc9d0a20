"""Multi-language title extraction.

Titles are rendered once per language as ``<span class="albumtitle"
lang="...">`` elements. Annotation markers (separators, footnotes) are
wrapped in ``<em>`` and are not part of the title.
"""

import logging

from bs4 import Tag

from vgmeta.models.domain import MultiLanguageString
from vgmeta.utils.markup import is_text

logger = logging.getLogger(__name__)

TITLE_CLASS = "albumtitle"
LANGUAGE_ATTR = "lang"
ANNOTATION_TAG = "em"


def _collect_text(node: Tag, parts: list[str]) -> None:
    for child in node.children:
        if is_text(child):
            parts.append(str(child))
        elif isinstance(child, Tag) and child.name != ANNOTATION_TAG:
            _collect_text(child, parts)


def title_text(span: Tag) -> str:
    """Text of a title span, excluding anything nested in ``<em>``."""
    parts: list[str] = []
    _collect_text(span, parts)
    return "".join(parts)


def extract_multi_language(container: Tag) -> MultiLanguageString:
    """Extract a multi-language title from a container element.

    Every descendant ``albumtitle`` span contributes its text under its
    ``lang`` attribute. A later span with the same language overwrites an
    earlier one. Never raises: a container without title spans yields an
    empty string.

    Args:
        container: Element holding the title spans (the page ``<h1>`` or
            a search result cell).

    Returns:
        The title keyed by language.
    """
    titles: dict[str, str] = {}
    for span in container.find_all(class_=TITLE_CLASS):
        language = span.get(LANGUAGE_ATTR)
        if not language:
            logger.debug("Skipping title span without a language: %s", span)
            continue
        titles[str(language)] = title_text(span)
    return MultiLanguageString(titles)
