"""Placeholder resolution from a block table into a node tree."""

from typing import List

from ..ast.node import RPPNode
from ..errors import StructuralError
from .blocks import BlockTable, ref_index
from .tokenizer import Tokenizer


class TreeAssembler:
    """
    Builds the node tree rooted at the table's root placeholder.

    Blocks are tokenized at each place they are referenced, so two
    byte-identical blocks still become two distinct nodes.
    """

    def __init__(self, table: BlockTable):
        self.table = table
        self.index: List[RPPNode] = []
        self.tokenizer = Tokenizer(table, self.index)

    def assemble(self) -> RPPNode:
        """Resolve the root placeholder into the document tree."""
        root = ref_index(self.table.root or "")
        if root is None:
            raise StructuralError("Block table has no root placeholder")
        return self.resolve(root)

    def resolve(self, index: int) -> RPPNode:
        """Resolve one block table entry, recursing into nested blocks."""
        if not 0 <= index < len(self.table):
            raise StructuralError(f"Reference to unknown block {index}")

        def resolve_nested(nested: int) -> RPPNode:
            # Nested blocks are always extracted in an earlier pass
            if nested >= index:
                raise StructuralError(f"Block {index} references later block {nested}")
            return self.resolve(nested)

        return self.tokenizer.tokenize_block(self.table[index], resolve_nested)
