"""
AST module for REAPER projects.

This module provides:
- Node class definitions for representing project structure
- Tag-chain selectors for querying the tree
- Visitor patterns for traversal, diffing, and serialization
- Content hashing for change detection
"""

from .node import (
    RPPNode,
    NodeType,
    ParamValue,
    same_value,
)

from .selector import (
    query_nodes,
    query_within,
    contains_child,
)

from .visitor import (
    ASTVisitor,
    SerializationVisitor,
    DiffVisitor,
    PrettyPrintVisitor,
    SearchVisitor,
)

from .hashing import (
    NodeHasher,
    hash_tree,
)

__all__ = [
    # Nodes
    "RPPNode",
    "NodeType",
    "ParamValue",
    "same_value",
    # Selectors
    "query_nodes",
    "query_within",
    "contains_child",
    # Visitors
    "ASTVisitor",
    "SerializationVisitor",
    "DiffVisitor",
    "PrettyPrintVisitor",
    "SearchVisitor",
    # Hashing
    "NodeHasher",
    "hash_tree",
]
