"""
AST node definitions for REAPER projects.

Every line of an RPP document becomes one RPPNode. Bracketed blocks carry
their body lines as children, except for a fixed set of opaque tags whose
body is kept verbatim as a payload.
"""

from typing import Optional, List, Union
from dataclasses import dataclass, field
from enum import Enum


ParamValue = Union[str, int, float]


class NodeType(Enum):
    """Enumeration of AST node types."""
    BLOCK = "block"
    LINE = "line"
    OPAQUE = "opaque"


@dataclass
class RPPNode:
    """
    A single tag of a REAPER project.

    A node has either children (possibly none) or a payload, never both.
    """
    node_type: NodeType
    tag: str
    params: List[ParamValue] = field(default_factory=list)
    children: List['RPPNode'] = field(default_factory=list)
    payload: Optional[str] = None
    hash: Optional[str] = field(default=None, compare=False, repr=False)  # Computed by hashing.py

    @property
    def is_opaque(self) -> bool:
        return self.payload is not None

    def matches(self, tag: str) -> bool:
        """Case-insensitive tag comparison."""
        return self.tag.casefold() == tag.casefold()

    def __repr__(self) -> str:
        return f"{self.node_type.value}(tag={self.tag}, params={len(self.params)}, children={len(self.children)})"


def is_number(value: ParamValue) -> bool:
    """True for int/float parameters (bools never come out of the tokenizer)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def same_value(a: ParamValue, b: ParamValue) -> bool:
    """
    Compare two parameter values by kind and content.

    Numbers compare with numbers (1 == 1.0), strings with strings; a number
    never equals its string spelling.
    """
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    return False
