"""
Content hashing for AST nodes.

Hashes let a reload tell whole unchanged subtrees apart from edited ones
without walking them.
"""

import hashlib
import json
from typing import Any, List
from .node import RPPNode


class NodeHasher:
    """
    Computes SHA-256 hashes for AST nodes.

    The hash is computed from:
    - Tag
    - Parameters (with their types, so 1 and "1" differ)
    - Payload of opaque nodes
    - Hashes of all children
    """

    def __init__(self, algorithm: str = "sha256"):
        """
        Initialize the hasher.

        Args:
            algorithm: Hash algorithm to use (default: sha256)
        """
        self.algorithm = algorithm

    def hash_node(self, node: RPPNode, recursive: bool = True) -> str:
        """
        Compute hash for a node.

        Args:
            node: The AST node to hash
            recursive: If True, recursively hash children first

        Returns:
            Hexadecimal hash string
        """
        if recursive:
            for child in node.children:
                if child.hash is None:
                    self.hash_node(child, recursive=True)

        node.hash = self._compute_hash(node)
        return node.hash

    def _compute_hash(self, node: RPPNode) -> str:
        hasher = hashlib.new(self.algorithm)
        hasher.update(node.node_type.value.encode('utf-8'))
        hasher.update(node.tag.encode('utf-8'))
        hasher.update(self._serialize_params(node.params).encode('utf-8'))

        if node.payload is not None:
            hasher.update(node.payload.encode('utf-8'))

        # Include child hashes (not full content)
        for child in node.children:
            if child.hash:
                hasher.update(child.hash.encode('utf-8'))

        return hasher.hexdigest()

    def _serialize_params(self, params: List[Any]) -> str:
        """Serialize params to a deterministic, type-aware string."""
        return json.dumps([[type(p).__name__, p] for p in params])

    def verify_hash(self, node: RPPNode) -> bool:
        """
        Verify that a node's hash matches its current content.

        Returns:
            True if hash is valid, False otherwise
        """
        if node.hash is None:
            return False
        return node.hash == self._compute_hash(node)


def hash_tree(root: RPPNode, algorithm: str = "sha256") -> RPPNode:
    """
    Convenience function to hash an entire AST tree.

    Args:
        root: Root node of the tree
        algorithm: Hash algorithm to use

    Returns:
        The root node (with all hashes computed)
    """
    hasher = NodeHasher(algorithm=algorithm)
    hasher.hash_node(root, recursive=True)
    return root
