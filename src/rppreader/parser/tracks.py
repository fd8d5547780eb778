from typing import List, Optional

from ..ast.node import RPPNode
from ..ast.selector import contains_child
from ..constants import ItemTags
from .document import Document


def find_tracks(document: Document, name: str) -> List[RPPNode]:
    """All TRACK blocks whose NAME line holds ``name``."""
    return contains_child(document.query(ItemTags.TRACK), ItemTags.NAME, name)


def find_track(document: Document, name: str) -> Optional[RPPNode]:
    """The first TRACK named ``name``, or None."""
    tracks = find_tracks(document, name)
    return tracks[0] if tracks else None


def track_name(track: RPPNode) -> Optional[str]:
    """NAME of a TRACK block, or None if it has none."""
    for child in track.children:
        if child.matches(ItemTags.NAME) and child.params:
            return str(child.params[0])
    return None
