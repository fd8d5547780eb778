"""
Block extraction for RPP documents.

Nested ``<TAG ... >`` spans are flattened innermost-first into an ordered
table. Each pass replaces every innermost span with a placeholder token
referencing its table entry, until the whole document collapses into a
single placeholder for the root block.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..constants import ParserConstants
from ..errors import StructuralError

logger = logging.getLogger(__name__)


@dataclass
class BlockTable:
    """Ordered, deduplicated table of raw block texts."""
    blocks: List[str] = field(default_factory=list)
    root: Optional[str] = None  # Placeholder of the outermost block
    _positions: Dict[str, int] = field(default_factory=dict, repr=False)

    def add(self, text: str) -> int:
        """Return the index of ``text``, appending it if it is new."""
        index = self._positions.get(text)
        if index is None:
            index = len(self.blocks)
            self.blocks.append(text)
            self._positions[text] = index
        return index

    def __getitem__(self, index: int) -> str:
        return self.blocks[index]

    def __len__(self) -> int:
        return len(self.blocks)

    def expand(self, text: str) -> str:
        """Replace every placeholder in ``text`` with its literal source text."""
        return ParserConstants.BLOCK_REF.sub(
            lambda m: self.expand(self.blocks[int(m.group(1))]), text
        )


def ref_index(token: str) -> Optional[int]:
    """Table index of a token that is exactly one block placeholder."""
    match = ParserConstants.BLOCK_REF.fullmatch(token)
    return int(match.group(1)) if match else None


def extract_blocks(text: str) -> BlockTable:
    """
    Flatten the bracketed spans of ``text`` into a block table.

    Args:
        text: Normalized document text

    Returns:
        BlockTable whose ``root`` is the placeholder of the outermost block

    Raises:
        StructuralError: If a pass makes no progress or the document does
            not collapse to exactly one root block
    """
    table = BlockTable()
    passes = 0

    def replace(match) -> str:
        return ParserConstants.block_ref(table.add(match.group(0)))

    while "<" in text or ">" in text:
        text, count = ParserConstants.INNERMOST_BLOCK.subn(replace, text)
        passes += 1
        if count == 0:
            raise StructuralError(_describe_dangling(text))

    if ref_index(text) is None:
        if not text:
            raise StructuralError("Document is empty")
        raise StructuralError("Document does not collapse to a single root block")

    table.root = text
    logger.debug(f"Extracted {len(table)} blocks in {passes} passes")
    return table


def _describe_dangling(text: str) -> str:
    if "<" in text:
        return "Unterminated block: '<' without a matching '>'"
    return "Unmatched '>' outside of any block"
