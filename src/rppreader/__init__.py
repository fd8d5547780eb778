"""
Reader for REAPER project (.rpp) files.

Parses a project into a tree of RPPNodes and answers tag-chain queries:

    >>> doc = parse(text)
    >>> track = contains_child(doc.query("TRACK"), "NAME", "Kewlio")[0]
    >>> items = query_within(track, "ITEM")
"""

from .ast import RPPNode, NodeType, query_within, contains_child
from .errors import RPPError, StructuralError, WrongNodeKind, MissingAttribute
from .parser import (
    Document,
    parse,
    parse_file,
    load_rpp,
    ItemRecord,
    interpret_item,
    extract_items,
    find_track,
)

__all__ = [
    "RPPNode",
    "NodeType",
    "query_within",
    "contains_child",
    "RPPError",
    "StructuralError",
    "WrongNodeKind",
    "MissingAttribute",
    "Document",
    "parse",
    "parse_file",
    "load_rpp",
    "ItemRecord",
    "interpret_item",
    "extract_items",
    "find_track",
]
