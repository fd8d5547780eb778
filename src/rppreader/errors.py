"""
Exception types raised by the REAPER project reader.

Queries never raise; an empty result is a valid answer. Parsing raises
StructuralError, and the item interpreter raises WrongNodeKind or
MissingAttribute.
"""

from typing import Optional


class RPPError(Exception):
    """Base class for all reader errors."""
    pass


class StructuralError(RPPError):
    """Raised when the bracket structure of a document cannot be resolved."""
    pass


class WrongNodeKind(RPPError, TypeError):
    """Raised when a node of the wrong tag is handed to an interpreter."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} node, got {actual}")


class MissingAttribute(RPPError, LookupError):
    """Raised when an expected attribute line is absent under a node."""

    def __init__(self, tag: str, attribute: str, detail: Optional[str] = None):
        self.tag = tag
        self.attribute = attribute
        message = f"{tag} node has no {attribute} attribute"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
