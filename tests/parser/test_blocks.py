"""Tests for block extraction."""

import pytest

from rppreader.errors import StructuralError
from rppreader.parser.blocks import extract_blocks, ref_index
from rppreader.constants import ParserConstants


class TestExtractBlocks:
    """Test the fixpoint flattening of bracketed spans."""

    def test_innermost_blocks_come_first(self):
        table = extract_blocks("<ROOT\n<CHILD\nA 1\n>\n>")
        assert len(table) == 2
        assert table[0] == "<CHILD\nA 1\n>"
        assert table[1] == f"<ROOT\n{ParserConstants.block_ref(0)}\n>"
        assert table.root == ParserConstants.block_ref(1)

    def test_identical_blocks_share_one_entry(self):
        text = "<ROOT\n<ITEM\nPOSITION 1\n>\n<ITEM\nPOSITION 1\n>\n>"
        table = extract_blocks(text)
        assert len(table) == 2
        ref = ParserConstants.block_ref(0)
        assert table[1] == f"<ROOT\n{ref}\n{ref}\n>"

    def test_root_reference(self):
        table = extract_blocks("<ROOT\n>")
        assert ref_index(table.root) == 0

    def test_expand_restores_source_text(self):
        text = "<ROOT\n<A\n<B\nX 1\n>\n>\n>"
        table = extract_blocks(text)
        assert table.expand(table.root) == text

    def test_unmatched_open_bracket_raises(self):
        with pytest.raises(StructuralError, match="Unterminated"):
            extract_blocks("<ROOT\nNAME x\n<TRACK\n>")

    def test_stray_close_bracket_raises(self):
        with pytest.raises(StructuralError, match="Unmatched"):
            extract_blocks("<A\n>\n>")

    def test_empty_document_raises(self):
        with pytest.raises(StructuralError, match="empty"):
            extract_blocks("")

    def test_text_without_blocks_raises(self):
        with pytest.raises(StructuralError, match="single root"):
            extract_blocks("RIPPLE 0")

    def test_two_top_level_blocks_raise(self):
        with pytest.raises(StructuralError, match="single root"):
            extract_blocks("<A\n>\n<B\n>")


def test_ref_index_requires_whole_token():
    ref = ParserConstants.block_ref(7)
    assert ref_index(ref) == 7
    assert ref_index(f"NAME {ref}") is None
    assert ref_index("7") is None
