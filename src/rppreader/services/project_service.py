"""
Project service for document loading and reloading.

This service handles project file loading, hashing, and computing the
changes between two saves of the same project.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

from ..ast import hash_tree
from ..parser import parse_file

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Service for project loading and management.

    Provides operations for:
    - Loading .rpp files
    - Hashing the parsed tree
    - Reloading and diffing against the previous parse
    """

    def __init__(self, workspace):
        """
        Initialize project service.

        Args:
            workspace: RPPWorkspace instance
        """
        self.workspace = workspace
        self.logger = logging.getLogger(f"{__name__}.ProjectService")

    def load_project(self, file_path: Path) -> Dict[str, Any]:
        """
        Load a REAPER project file and build its tree.

        Args:
            file_path: Path to .rpp file

        Returns:
            Dictionary with status and basic project info

        Raises:
            StructuralError: If the file cannot be parsed
        """
        file_path = Path(file_path)
        document = parse_file(file_path)
        hash_tree(document.root)

        self.workspace.current_file = file_path
        self.workspace.current_document = document
        self.logger.info(f"Loaded {file_path.name}: {len(document)} nodes")

        return {
            "status": "success",
            "file": str(file_path),
            "root_hash": document.root.hash,
            "num_nodes": len(document),
        }

    def reload_project(self) -> List[Dict[str, Any]]:
        """
        Re-parse the current file and report what changed.

        Returns:
            List of changes from DiffVisitor (empty if nothing changed)

        Raises:
            RuntimeError: If no project is loaded
        """
        if self.workspace.current_document is None:
            raise RuntimeError("No project loaded")

        old_root = self.workspace.current_document.root
        self.load_project(self.workspace.current_file)
        new_root = self.workspace.current_document.root

        if old_root.hash == new_root.hash:
            self.logger.info("No changes detected (hash identical)")
            return []

        changes = self.workspace.diff_visitor.diff(old_root, new_root)
        self.logger.info(f"Reload found {len(changes)} changes")
        return changes
