"""Extract media item information from REAPER ITEM blocks."""

import logging
from dataclasses import dataclass
from typing import List

from ..ast.node import RPPNode, ParamValue, is_number
from ..ast.selector import query_within
from ..constants import ItemTags
from ..errors import MissingAttribute, WrongNodeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemRecord:
    """
    A media item placed on a track.

    ``source_fallback`` is True when the item had no source file and its
    name was used in its place.
    """
    name: str
    start: float
    length: float
    source: str
    source_fallback: bool = False

    @property
    def end(self) -> float:
        return self.start + self.length


def _attribute(node: RPPNode, *chain: str) -> ParamValue:
    """First param of the first line reached by ``chain`` under ``node``."""
    matches = query_within(node, *chain)
    if not matches or not matches[0].params:
        raise MissingAttribute(node.tag, "/".join(chain))
    return matches[0].params[0]


def _number(node: RPPNode, tag: str) -> float:
    value = _attribute(node, tag)
    if not is_number(value):
        raise MissingAttribute(node.tag, tag, f"not numeric: {value!r}")
    return value


def interpret_item(node: RPPNode, fallback_to_name: bool = False) -> ItemRecord:
    """
    Build an ItemRecord from an ITEM node.

    Args:
        node: Node returned by a query for ITEM
        fallback_to_name: Use the item name when SOURCE/FILE is absent

    Returns:
        ItemRecord with name, start, length and source

    Raises:
        WrongNodeKind: If ``node`` is not an ITEM
        MissingAttribute: If NAME, POSITION or LENGTH is absent, or the
            source file is absent and no fallback was requested
    """
    if not node.matches(ItemTags.ITEM):
        raise WrongNodeKind(ItemTags.ITEM, node.tag)

    name = str(_attribute(node, ItemTags.NAME))
    start = _number(node, ItemTags.POSITION)
    length = _number(node, ItemTags.LENGTH)

    try:
        source = str(_attribute(node, ItemTags.SOURCE, ItemTags.FILE))
        fallback = False
    except MissingAttribute:
        if not fallback_to_name:
            raise
        source = name
        fallback = True

    return ItemRecord(name=name, start=start, length=length, source=source, source_fallback=fallback)


def extract_items(track: RPPNode, fallback_to_name: bool = True) -> List[ItemRecord]:
    """
    Extract every ITEM directly under a TRACK block, in source order.

    Items without a source file (MIDI, empty items) fall back to their
    name when ``fallback_to_name`` is set; each fallback is logged.
    """
    items = []
    for item_node in query_within(track, ItemTags.ITEM):
        item = interpret_item(item_node, fallback_to_name=fallback_to_name)
        if item.source_fallback:
            logger.warning(f"Item '{item.name}' at {item.start}s has no source file; using its name")
        items.append(item)
    return items
