"""Track list alignment across language panels.

The album page renders its track list once per display language, as
separate panels inside ``#tracklist``. A navigation bar (``#tlnav``) maps
each panel's id to a language label. Panels are parsed independently and
then merged so every track carries one name per language.

Alignment Overview:
===================
1. find_track_list() - Locate the navigation bar and the panel container
2. extract_panel() - Per panel: disc titles and trimmed track names
3. merge_panel() - Zip each panel into the discs established by the first
                   panel, disc by disc then track by track

The site has no track identifier shared between panels, so position is the
only correlation key. merge_panel() zips and the shorter side wins: tracks
beyond a later panel's length never receive that panel's language, and a
panel that reorders tracks produces mismatched names.
"""

import logging
from dataclasses import dataclass, field
from typing import NamedTuple

from bs4 import Tag

from vgmeta.exceptions import MissingStructureError, UnresolvedLanguageError
from vgmeta.models.domain import Disc, MultiLanguageString, Track
from vgmeta.utils.markup import child_elements

logger = logging.getLogger(__name__)

NAVIGATION_ID = "tlnav"
TRACK_LIST_ID = "tracklist"
PANEL_CLASS = "tl"
REFERENCE_ATTR = "rel"
DISC_MARKER_SELECTOR = '[style="font-size:8pt"] b'
TRACK_NAME_CELL = {"width": "100%"}


class PanelDisc(NamedTuple):
    """One disc as rendered in a single language panel."""

    title: str
    track_names: list[str]


@dataclass
class DiscDraft:
    """A disc being merged. Each track maps language to name."""

    title: str
    tracks: list[dict[str, str]] = field(default_factory=list)

    def build(self) -> Disc:
        return Disc(
            title=self.title,
            tracks=[Track(name=MultiLanguageString(names)) for names in self.tracks],
        )


def find_track_list(document: Tag) -> tuple[Tag, Tag]:
    """Locate the track list navigation bar and panel container.

    Returns:
        ``(navigation, track_list)`` elements.

    Raises:
        MissingStructureError: If either region is absent.
    """
    navigation = document.find(id=NAVIGATION_ID)
    if not isinstance(navigation, Tag):
        raise MissingStructureError("Track list navigation not found")
    track_list = document.find(id=TRACK_LIST_ID)
    if not isinstance(track_list, Tag):
        raise MissingStructureError("Track list not found")
    return navigation, track_list


def resolve_language(navigation: Tag, reference: str) -> str:
    """Map a panel reference to its language label via the navigation bar.

    Raises:
        UnresolvedLanguageError: If no navigation entry points at the panel.
    """
    entry = navigation.find(attrs={REFERENCE_ATTR: reference})
    if not isinstance(entry, Tag):
        raise UnresolvedLanguageError(
            f"No language found for track list panel: {reference}"
        )
    return entry.get_text().strip()


def find_disc_table(marker: Tag) -> Tag:
    """Find the track table belonging to a disc-title marker.

    The table is the first ``<table>`` among the siblings that follow the
    marker's parent element.

    Raises:
        MissingStructureError: If no table follows the marker.
    """
    anchor = marker.parent
    container = anchor.parent if anchor is not None else None
    if anchor is None or container is None:
        raise MissingStructureError(f"Disc marker is detached: {marker.get_text()!r}")

    siblings = child_elements(container)
    position = next(i for i, sibling in enumerate(siblings) if sibling is anchor)
    for sibling in siblings[position + 1 :]:
        if sibling.name == "table":
            return sibling

    raise MissingStructureError(
        f"No track table follows disc: {marker.get_text().strip()!r}"
    )


def extract_panel(panel: Tag) -> list[PanelDisc]:
    """Extract disc titles and track names from one language panel.

    Raises:
        MissingStructureError: If a disc has no track table, or a track row
            has no full-width name cell.
    """
    discs: list[PanelDisc] = []
    for marker in panel.select(DISC_MARKER_SELECTOR):
        table = find_disc_table(marker)
        names: list[str] = []
        for row in table.find_all("tr"):
            cell = row.find("td", attrs=TRACK_NAME_CELL)
            if not isinstance(cell, Tag):
                raise MissingStructureError(
                    f"Track row without a name cell in disc: {marker.get_text()!r}"
                )
            names.append(cell.get_text().strip())
        discs.append(PanelDisc(title=marker.get_text().strip(), track_names=names))
    return discs


def merge_panel(
    discs: list[DiscDraft], language: str, panel: list[PanelDisc]
) -> list[DiscDraft]:
    """Merge one language panel into the discs built so far.

    While ``discs`` is empty the panel establishes the disc sequence and
    its titles. Otherwise it is zipped positionally against ``discs``: the
    shorter side wins at both the disc and the track level, and the panel's
    own disc titles are discarded.

    Args:
        discs: Discs established by earlier panels. Updated in place.
        language: Language label of this panel.
        panel: Discs as rendered by this panel.

    Returns:
        The updated ``discs`` list.
    """
    if not discs:
        discs.extend(
            DiscDraft(
                title=disc.title,
                tracks=[{language: name} for name in disc.track_names],
            )
            for disc in panel
        )
        return discs

    if len(panel) != len(discs):
        logger.debug(
            "Panel %r has %d discs, expected %d", language, len(panel), len(discs)
        )
    for draft, disc in zip(discs, panel):
        if len(disc.track_names) != len(draft.tracks):
            logger.debug(
                "Panel %r disc %r has %d tracks, expected %d",
                language,
                draft.title,
                len(disc.track_names),
                len(draft.tracks),
            )
        for names, name in zip(draft.tracks, disc.track_names):
            names[language] = name
    return discs


def align_track_list(document: Tag) -> list[Disc]:
    """Build the multi-language disc listing of an album page.

    Panels are processed in document order; the first one fixes the disc
    and track counts.

    Args:
        document: Parsed album page.

    Returns:
        Discs with one name per language on every track.

    Raises:
        MissingStructureError: If the navigation bar, the track list, a
            panel id, a disc table or a track name cell is missing.
        UnresolvedLanguageError: If a panel has no navigation entry.
    """
    navigation, track_list = find_track_list(document)

    discs: list[DiscDraft] = []
    for panel in track_list.find_all(class_=PANEL_CLASS):
        reference = panel.get("id")
        if not reference:
            raise MissingStructureError("Track list panel without an id")
        language = resolve_language(navigation, str(reference))
        merge_panel(discs, language, extract_panel(panel))

    logger.debug("Aligned %d disc(s)", len(discs))
    return [draft.build() for draft in discs]
