"""
Parsed REAPER documents.

``parse()`` runs the full pipeline (normalization, block extraction,
tokenization and tree assembly) and returns a Document bundling the tree
root with the flat index of every node.
"""

import logging
from pathlib import Path
from typing import List, Tuple

from ..ast.node import RPPNode, ParamValue
from ..ast import selector
from .assembler import TreeAssembler
from .blocks import extract_blocks
from .rpp_loader import load_rpp, normalize_text

logger = logging.getLogger(__name__)


class Document:
    """
    Result of one parse call.

    Both the tree and the index are built once and never modified, so a
    Document can be shared between readers.
    """

    def __init__(self, root: RPPNode, index: List[RPPNode]):
        self.root = root
        self.index: Tuple[RPPNode, ...] = tuple(index)

    def query(self, *tags: str) -> List[RPPNode]:
        """
        Search the whole document for a tag chain.

        The first tag matches at any depth; every further tag must be a
        direct child of the previous match.

        Example:
            >>> doc.query("TRACK", "ITEM")  # items of every track
        """
        return selector.query_nodes(self.index, *tags)

    @staticmethod
    def query_within(node: RPPNode, *tags: str) -> List[RPPNode]:
        """Search a tag chain among the direct children of ``node`` only."""
        return selector.query_within(node, *tags)

    @staticmethod
    def contains_child(nodes: List[RPPNode], subtag: str, value: ParamValue) -> List[RPPNode]:
        """Keep nodes with a direct ``subtag`` child holding ``value``."""
        return selector.contains_child(nodes, subtag, value)

    def __len__(self) -> int:
        return len(self.index)

    def __repr__(self) -> str:
        return f"Document(root={self.root.tag}, nodes={len(self.index)})"


def parse(text: str) -> Document:
    """
    Parse REAPER project text into a Document.

    Args:
        text: Raw .rpp contents

    Returns:
        Document with the root node and the flat node index

    Raises:
        StructuralError: If the bracket structure cannot be resolved
    """
    table = extract_blocks(normalize_text(text))
    assembler = TreeAssembler(table)
    root = assembler.assemble()
    logger.debug(f"Parsed {root.tag}: {len(table)} blocks, {len(assembler.index)} nodes")
    return Document(root, assembler.index)


def parse_file(path: Path) -> Document:
    """Load and parse a .rpp file."""
    return parse(load_rpp(path))
