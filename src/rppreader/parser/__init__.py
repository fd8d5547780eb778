"""
Parser module for REAPER project files.

This module handles:
- Loading and normalizing .rpp files
- Flattening nested blocks into a block table
- Tokenizing lines into typed parameters
- Assembling the node tree and flat index
- Interpreting ITEM and TRACK blocks
"""

from .rpp_loader import load_rpp, normalize_text
from .blocks import BlockTable, extract_blocks
from .tokenizer import Tokenizer, coerce
from .assembler import TreeAssembler
from .document import Document, parse, parse_file
from .items import ItemRecord, interpret_item, extract_items
from .tracks import find_track, find_tracks, track_name

__all__ = [
    "load_rpp",
    "normalize_text",
    "BlockTable",
    "extract_blocks",
    "Tokenizer",
    "coerce",
    "TreeAssembler",
    "Document",
    "parse",
    "parse_file",
    "ItemRecord",
    "interpret_item",
    "extract_items",
    "find_track",
    "find_tracks",
    "track_name",
]
