"""
Constants for the REAPER project reader.

This module centralizes the magic values used by the parser, the item
interpreter and the file watcher.
"""

import re


class ParserConstants:
    """Constants for block extraction and line tokenization."""

    # Tags whose body is binary-as-text and is never tokenized
    OPAQUE_TAGS = frozenset({"COMMENT", "RENDER_CFG", "VST"})

    # Private-use sentinels, never present in REAPER output
    BLOCK_MARK = "\ue000"
    QUOTE_MARK = "\ue001"

    BLOCK_CLOSE = ">"

    # Innermost bracketed span: "<" through the next ">" with no "<" inside
    INNERMOST_BLOCK = re.compile(r"<[^<]*?>")
    BLOCK_REF = re.compile(BLOCK_MARK + r"(\d+)" + BLOCK_MARK)
    QUOTE_REF = re.compile(QUOTE_MARK + r"(\d+)" + QUOTE_MARK)

    # Non-escaped double quote through the next non-escaped double quote
    QUOTED = re.compile(r'(?<!\\)".*?(?<!\\)"')

    FLOAT_TOKEN = re.compile(r"^-?\d*\.\d+$")
    INT_TOKEN = re.compile(r"^-?\d+$")

    @staticmethod
    def block_ref(index: int) -> str:
        """Placeholder token standing in for block table entry ``index``."""
        return f"{ParserConstants.BLOCK_MARK}{index}{ParserConstants.BLOCK_MARK}"

    @staticmethod
    def quote_ref(index: int) -> str:
        """Placeholder token standing in for a protected quoted span."""
        return f"{ParserConstants.QUOTE_MARK}{index}{ParserConstants.QUOTE_MARK}"


class ItemTags:
    """Tag names the item interpreter relies on."""

    TRACK = "TRACK"
    ITEM = "ITEM"
    NAME = "NAME"
    POSITION = "POSITION"
    LENGTH = "LENGTH"
    SOURCE = "SOURCE"
    FILE = "FILE"
    MARKER = "MARKER"


class WatchConstants:
    """Constants for project file watching."""

    DEBOUNCE_SECONDS = 1.0  # Ignore duplicate events within 1 second
    EXTENSIONS = frozenset({".rpp"})
