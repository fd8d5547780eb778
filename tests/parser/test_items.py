"""Tests for ITEM interpretation and track lookup."""

import logging

import pytest

from rppreader import interpret_item, extract_items, find_track, MissingAttribute, WrongNodeKind
from rppreader.parser import find_tracks, track_name, parse


@pytest.fixture
def kewlio(document):
    return find_track(document, "Kewlio")


class TestInterpretItem:
    """Test projecting ITEM nodes into ItemRecords."""

    def test_music_item(self, document):
        item = interpret_item(document.query("ITEM")[0])
        assert item.name == "SEG 01 Intro"
        assert item.start == 0
        assert item.length == 120.5
        assert item.end == 120.5
        assert item.source == "music/intro.wav"
        assert item.source_fallback is False

    def test_end_is_start_plus_length(self, document):
        item = interpret_item(document.query("ITEM")[1])
        assert item.start == 10.25
        assert item.end == 15.25

    def test_missing_source_raises(self, document):
        midi_item = document.query("ITEM")[2]
        with pytest.raises(MissingAttribute) as exc_info:
            interpret_item(midi_item)
        assert exc_info.value.attribute == "SOURCE/FILE"
        assert exc_info.value.tag == "ITEM"

    def test_missing_source_falls_back_to_name(self, document):
        midi_item = document.query("ITEM")[2]
        item = interpret_item(midi_item, fallback_to_name=True)
        assert item.source == "Voice 2"
        assert item.source_fallback is True

    def test_wrong_node_kind(self, document):
        track = document.query("TRACK")[0]
        with pytest.raises(WrongNodeKind, match="Expected ITEM node, got TRACK"):
            interpret_item(track)

    def test_wrong_node_kind_is_type_error(self, document):
        with pytest.raises(TypeError):
            interpret_item(document.root)

    def test_missing_position(self):
        doc = parse('<ROOT\n<ITEM\nLENGTH 1\nNAME "x"\n>\n>')
        with pytest.raises(MissingAttribute, match="POSITION"):
            interpret_item(doc.query("ITEM")[0], fallback_to_name=True)

    def test_non_numeric_length(self):
        doc = parse('<ROOT\n<ITEM\nPOSITION 1\nLENGTH abc\nNAME "x"\n>\n>')
        with pytest.raises(MissingAttribute, match="not numeric"):
            interpret_item(doc.query("ITEM")[0], fallback_to_name=True)

    def test_numeric_name_becomes_string(self):
        doc = parse('<ROOT\n<ITEM\nPOSITION 1\nLENGTH 2\nNAME "42"\n>\n>')
        item = interpret_item(doc.query("ITEM")[0], fallback_to_name=True)
        assert item.name == "42"
        assert item.source == "42"

    def test_numeric_name_keeps_coerced_spelling(self):
        # The raw token is gone after coercion
        doc = parse('<ROOT\n<ITEM\nPOSITION 1\nLENGTH 2\nNAME "1.50"\n<SOURCE WAVE\nFILE "a.wav"\n>\n>\n>')
        assert interpret_item(doc.query("ITEM")[0]).name == "1.5"


class TestExtractItems:
    """Test mapping a track's items."""

    def test_items_in_source_order(self, kewlio):
        items = extract_items(kewlio)
        assert [i.name for i in items] == ["Voice 1", "Voice 2"]
        assert [i.source_fallback for i in items] == [False, True]

    def test_fallback_is_logged(self, kewlio, caplog):
        with caplog.at_level(logging.WARNING, logger="rppreader.parser.items"):
            extract_items(kewlio)
        assert "Voice 2" in caplog.text

    def test_without_fallback_raises(self, kewlio):
        with pytest.raises(MissingAttribute):
            extract_items(kewlio, fallback_to_name=False)


class TestTracks:
    """Test locating tracks by name."""

    def test_find_track(self, document):
        track = find_track(document, "Music Track")
        assert track is not None
        assert track_name(track) == "Music Track"

    def test_find_track_missing(self, document):
        assert find_track(document, "Nobody") is None
        assert find_tracks(document, "Nobody") == []

    def test_track_name_without_name_line(self):
        doc = parse("<ROOT\n<TRACK\n>\n>")
        assert track_name(doc.query("TRACK")[0]) is None
