"""
Workspace holding the currently loaded REAPER project.

This provides a programmatic interface for:
- Loading and parsing .rpp files
- Querying the parsed document
- Extracting track items
- Reloading automatically when the project is saved
"""

import logging
from pathlib import Path
from typing import Optional, Dict, Any, List, Callable

from .ast import DiffVisitor
from .parser import Document, ItemRecord
from .services import QueryService, ProjectService
from .watcher import FileWatcher

logger = logging.getLogger(__name__)


class RPPWorkspace:
    """
    Workspace for one REAPER project at a time.

    Delegates to QueryService and ProjectService; the document it holds is
    replaced wholesale on every (re)load and never modified in place.
    """

    def __init__(self):
        self.current_document: Optional[Document] = None
        self.current_file: Optional[Path] = None
        self.diff_visitor = DiffVisitor()
        self.watcher: Optional[FileWatcher] = None

        self.query_service = QueryService(self)
        self.project_service = ProjectService(self)

    def load_project(self, file_path: Path) -> Dict[str, Any]:
        """Load a project file. See ProjectService.load_project."""
        return self.project_service.load_project(file_path)

    def reload_project(self) -> List[Dict[str, Any]]:
        """Re-parse the current file. See ProjectService.reload_project."""
        return self.project_service.reload_project()

    def query(self, *tags: str) -> List[Dict[str, Any]]:
        return self.query_service.query(*tags)

    def get_track_items(self, name: str, fallback_to_name: bool = True) -> List[ItemRecord]:
        return self.query_service.get_track_items(name, fallback_to_name=fallback_to_name)

    def get_project_info(self) -> Dict[str, Any]:
        return self.query_service.get_project_info()

    def get_ast_json(self, include_hash: bool = True) -> str:
        return self.query_service.get_ast_json(include_hash=include_hash)

    def start_watching(self, on_reload: Optional[Callable[[List[Dict[str, Any]]], None]] = None) -> FileWatcher:
        """
        Reload the current project whenever it is saved.

        Args:
            on_reload: Called with the list of changes after each reload

        Raises:
            RuntimeError: If no project is loaded
        """
        if self.current_file is None:
            raise RuntimeError("No project loaded")

        def on_change(file_path: Path) -> None:
            logger.info(f"Detected change in {file_path.name}")
            changes = self.reload_project()
            if on_reload:
                on_reload(changes)

        self.watcher = FileWatcher(on_change)
        self.watcher.watch(self.current_file)
        self.watcher.start()
        return self.watcher

    def stop_watching(self) -> None:
        if self.watcher:
            self.watcher.stop()
            self.watcher = None
