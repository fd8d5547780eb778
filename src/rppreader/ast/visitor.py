"""
Visitor pattern implementation for AST traversal, diffing, and serialization.

This module provides:
- Generic visitor pattern for AST traversal
- Serialization to JSON/dict
- Diff computation between two parses of a project
- Pretty printing for debugging
"""

from typing import Any, Dict, List, Optional, Callable
from .node import RPPNode
import json


class ASTVisitor:
    """
    Base visitor class for traversing AST nodes.

    Subclass this and override visit_* methods to implement custom behavior.
    """

    def visit(self, node: RPPNode) -> Any:
        """
        Visit a node and dispatch to the appropriate visit_* method.

        This implements double dispatch by calling visit_{node_type.value}.
        """
        method_name = f"visit_{node.node_type.value}"
        visitor_method = getattr(self, method_name, self.generic_visit)
        return visitor_method(node)

    def generic_visit(self, node: RPPNode) -> Any:
        """Default visit method that traverses children."""
        results = []
        for child in node.children:
            results.append(self.visit(child))
        return results

    def traverse(self, node: RPPNode, pre_order: bool = True) -> List[RPPNode]:
        """
        Traverse the tree and collect all nodes.

        Args:
            node: Root node to start traversal
            pre_order: If True, use pre-order traversal; otherwise post-order

        Returns:
            List of all nodes in traversal order
        """
        nodes = []
        if pre_order:
            nodes.append(node)
        for child in node.children:
            nodes.extend(self.traverse(child, pre_order))
        if not pre_order:
            nodes.append(node)
        return nodes


class SerializationVisitor(ASTVisitor):
    """Visitor that serializes AST to JSON-compatible dict structure."""

    def __init__(self, include_hash: bool = True):
        self.include_hash = include_hash

    def generic_visit(self, node: RPPNode) -> Dict[str, Any]:
        """Serialize a node to a dictionary."""
        result = {
            "node_type": node.node_type.value,
            "tag": node.tag,
            "params": list(node.params),
        }

        if node.is_opaque:
            result["payload"] = node.payload
        else:
            result["children"] = [self.visit(child) for child in node.children]

        if self.include_hash and node.hash:
            result["hash"] = node.hash

        return result

    def to_json(self, node: RPPNode, indent: int = 2) -> str:
        """Serialize AST to JSON string."""
        return json.dumps(self.visit(node), indent=indent)


class DiffVisitor(ASTVisitor):
    """
    Visitor that computes differences between two AST trees.

    RPP nodes carry no identity, so children are matched by position among
    their siblings.
    """

    def __init__(self):
        self.changes = []

    def diff(self, old_tree: RPPNode, new_tree: RPPNode) -> List[Dict[str, Any]]:
        """
        Compute diff between two AST trees.

        Returns:
            List of change records with format:
            {
                "type": "added" | "removed" | "modified",
                "path": ["REAPER_PROJECT", "TRACK[0]", ...],
                "tag": "TRACK",
                "old_value": {...},
                "new_value": {...}
            }
        """
        self.changes = []
        self._diff_nodes(old_tree, new_tree, [old_tree.tag])
        return self.changes

    def _diff_nodes(self, old: Optional[RPPNode], new: Optional[RPPNode], path: List[str]) -> None:
        """Recursively compare two nodes and their children."""
        # Node removed
        if old is not None and new is None:
            self.changes.append({
                "type": "removed",
                "path": path,
                "tag": old.tag,
                "old_value": self._node_to_dict(old),
                "new_value": None,
            })
            return

        # Node added
        if old is None and new is not None:
            self.changes.append({
                "type": "added",
                "path": path,
                "tag": new.tag,
                "old_value": None,
                "new_value": self._node_to_dict(new),
            })
            return

        # Identical subtrees need no walk
        if old.hash is not None and old.hash == new.hash:
            return

        if (old.tag, old.params, old.payload) != (new.tag, new.params, new.payload):
            self.changes.append({
                "type": "modified",
                "path": path,
                "tag": old.tag,
                "old_value": self._node_to_dict(old),
                "new_value": self._node_to_dict(new),
            })

        max_len = max(len(old.children), len(new.children))
        for i in range(max_len):
            old_child = old.children[i] if i < len(old.children) else None
            new_child = new.children[i] if i < len(new.children) else None
            tag = (old_child or new_child).tag
            self._diff_nodes(old_child, new_child, path + [f"{tag}[{i}]"])

    def _node_to_dict(self, node: RPPNode) -> Dict[str, Any]:
        """Convert node to a simple dict representation."""
        return {
            "node_type": node.node_type.value,
            "tag": node.tag,
            "params": list(node.params),
        }


class PrettyPrintVisitor(ASTVisitor):
    """Visitor that creates a human-readable string representation of the AST."""

    def __init__(self, indent: int = 2, max_payload: int = 32):
        self.indent = indent
        self.max_payload = max_payload
        self.current_depth = 0

    def _indent(self) -> str:
        return " " * (self.current_depth * self.indent)

    def _header(self, node: RPPNode) -> str:
        line = f"{self._indent()}{node.tag}"
        if node.params:
            line += " " + " ".join(repr(p) for p in node.params)
        return line

    def generic_visit(self, node: RPPNode) -> str:
        """Create indented string representation."""
        lines = [self._header(node)]

        # Visit children
        self.current_depth += 1
        for child in node.children:
            lines.append(self.visit(child))
        self.current_depth -= 1

        return "\n".join(lines)

    def visit_opaque(self, node: RPPNode) -> str:
        """Opaque blocks show their payload size and a truncated preview."""
        payload = node.payload
        if len(payload) > self.max_payload:
            payload = payload[:self.max_payload] + "..."
        return f"{self._header(node)}\n{self._indent()}  [{len(node.payload)} bytes] {payload}"

    def print(self, node: RPPNode) -> str:
        """Generate pretty-printed string of the AST."""
        self.current_depth = 0
        return self.visit(node)


class SearchVisitor(ASTVisitor):
    """Visitor for searching the tree (as opposed to the flat index)."""

    def find_by_tag(self, root: RPPNode, tag: str) -> List[RPPNode]:
        """Find all nodes with a tag at any depth below and including root."""
        return self.find_by_predicate(root, lambda node: node.matches(tag))

    def find_by_predicate(self, root: RPPNode, predicate: Callable[[RPPNode], bool]) -> List[RPPNode]:
        """Find all nodes matching a predicate function."""
        results = []
        if predicate(root):
            results.append(root)
        for child in root.children:
            results.extend(self.find_by_predicate(child, predicate))
        return results
