"""
Query service for document operations.

This service provides query, search and interpretation operations on the
currently loaded project.
"""

import logging
from typing import Dict, Any, List, Callable

from ..ast import (
    RPPNode,
    SerializationVisitor,
    SearchVisitor,
)
from ..constants import ItemTags
from ..parser import ItemRecord, extract_items, find_track, track_name

logger = logging.getLogger(__name__)


class QueryService:
    """
    Service for querying and searching the loaded document.

    Provides operations for:
    - Serialization (JSON export)
    - Tag-chain queries over the flat index
    - Predicate searches over the tree
    - Track item extraction
    - Project statistics
    """

    def __init__(self, workspace):
        """
        Initialize query service.

        Args:
            workspace: RPPWorkspace instance providing current_document
        """
        self.workspace = workspace
        self.serializer = SerializationVisitor()
        self.search_visitor = SearchVisitor()
        self.logger = logging.getLogger(f"{__name__}.QueryService")

    @property
    def document(self):
        """Get current document from workspace."""
        return self.workspace.current_document

    def _require_document(self):
        if self.document is None:
            raise RuntimeError("No project loaded")
        return self.document

    def get_ast_json(self, include_hash: bool = True) -> str:
        """
        Get the current tree as JSON.

        Raises:
            RuntimeError: If no project is loaded
        """
        document = self._require_document()
        serializer = SerializationVisitor(include_hash=include_hash)
        return serializer.to_json(document.root)

    def query(self, *tags: str) -> List[Dict[str, Any]]:
        """
        Run a global tag-chain query.

        Args:
            *tags: Tag chain, e.g. ("TRACK", "ITEM")

        Returns:
            List of serialized nodes

        Raises:
            RuntimeError: If no project is loaded
        """
        document = self._require_document()
        return [self.serializer.visit(node) for node in document.query(*tags)]

    def find_nodes(self, predicate: Callable[[RPPNode], bool]) -> List[RPPNode]:
        """
        Find all nodes in the tree matching a predicate.

        Raises:
            RuntimeError: If no project is loaded
        """
        document = self._require_document()
        return self.search_visitor.find_by_predicate(document.root, predicate)

    def get_track_items(self, name: str, fallback_to_name: bool = True) -> List[ItemRecord]:
        """
        Get the items of the track named ``name``.

        Returns:
            ItemRecords in source order (empty if no such track)

        Raises:
            RuntimeError: If no project is loaded
            MissingAttribute: If an item lacks a required attribute
        """
        document = self._require_document()
        track = find_track(document, name)
        if track is None:
            self.logger.warning(f"No track named '{name}'")
            return []
        return extract_items(track, fallback_to_name=fallback_to_name)

    def get_project_info(self) -> Dict[str, Any]:
        """
        Get high-level information about the loaded project.

        Raises:
            RuntimeError: If no project is loaded
        """
        document = self._require_document()
        tracks = document.query(ItemTags.TRACK)

        return {
            "file": str(self.workspace.current_file) if self.workspace.current_file else None,
            "root_tag": document.root.tag,
            "root_hash": document.root.hash,
            "num_nodes": len(document),
            "num_tracks": len(tracks),
            "num_items": len(document.query(ItemTags.ITEM)),
            "num_markers": len(document.query(ItemTags.MARKER)),
            "track_names": [track_name(t) for t in tracks],
        }
