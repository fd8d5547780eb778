"""
Tag-chain selectors over RPP nodes.

A tag chain is an ordered list of tag names. The first name filters the
starting candidates; each following name must match a direct child of a
previous match. All functions are read-only and return an empty list when
nothing matches.
"""

from typing import Iterable, List

from .node import RPPNode, ParamValue, same_value


def query_nodes(nodes: Iterable[RPPNode], *tags: str) -> List[RPPNode]:
    """
    Match a tag chain starting from ``nodes``.

    Args:
        nodes: Initial candidates (the flat index for a global search)
        *tags: Tag chain, compared case-insensitively

    Returns:
        Matching nodes in candidate order
    """
    matched = list(nodes)
    for depth, tag in enumerate(tags):
        if depth > 0:
            matched = [child for node in matched for child in node.children]
        matched = [node for node in matched if node.matches(tag)]
    return matched


def query_within(root: RPPNode, *tags: str) -> List[RPPNode]:
    """Match a tag chain against the direct children of ``root`` only."""
    return query_nodes(root.children, *tags)


def contains_child(nodes: Iterable[RPPNode], subtag: str, value: ParamValue) -> List[RPPNode]:
    """
    Keep nodes with a direct ``subtag`` child whose params include ``value``.

    Nodes without children never match, whatever their descendants hold.
    """
    kept = []
    for node in nodes:
        if not node.children:
            continue
        for child in query_within(node, subtag):
            if any(same_value(param, value) for param in child.params):
                kept.append(node)
                break
    return kept
