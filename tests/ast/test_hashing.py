"""Tests for content hashing."""

from rppreader import parse
from rppreader.ast import NodeHasher, hash_tree


def test_same_text_same_hash(sample_text):
    assert hash_tree(parse(sample_text).root).hash == hash_tree(parse(sample_text).root).hash


def test_change_alters_root_hash(sample_text):
    old = hash_tree(parse(sample_text).root)
    new = hash_tree(parse(sample_text.replace("LENGTH 5", "LENGTH 6")).root)
    assert old.hash != new.hash
    # Untouched subtrees keep their hashes
    assert old.children[4].hash == new.children[4].hash


def test_param_types_are_hashed():
    a = hash_tree(parse('<ROOT\nA 1\n>').root)
    b = hash_tree(parse('<ROOT\nA "x1"\n>').root)
    c = hash_tree(parse('<ROOT\nA 1.0\n>').root)
    assert a.hash != b.hash
    assert a.hash != c.hash


def test_payload_is_hashed():
    a = hash_tree(parse("<ROOT\n<VST x\nAAA\n>\n>").root)
    b = hash_tree(parse("<ROOT\n<VST x\nAAB\n>\n>").root)
    assert a.hash != b.hash


def test_verify_hash(document):
    hasher = NodeHasher()
    assert hasher.verify_hash(document.root) is False
    hasher.hash_node(document.root)
    assert hasher.verify_hash(document.root) is True
    document.root.params.append("edited")
    assert hasher.verify_hash(document.root) is False
