"""
File watcher for monitoring changes to REAPER project files.

This module provides:
- Filesystem monitoring for .rpp files
- Debounced change notification
- Integration with RPPWorkspace for automatic reloading
"""

import logging
import time
from pathlib import Path
from typing import Optional, Callable, Iterable
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler, FileSystemEvent

from .constants import WatchConstants

logger = logging.getLogger(__name__)


class RPPFileHandler(FileSystemEventHandler):
    """
    File system event handler for REAPER project files.

    Monitors .rpp files and triggers callbacks on changes.
    """

    def __init__(self, callback: Callable[[Path], None],
                 extensions: Iterable[str] = WatchConstants.EXTENSIONS,
                 only: Optional[Path] = None):
        """
        Initialize the file handler.

        Args:
            callback: Function to call when a file changes
            extensions: File extensions to monitor
            only: If set, ignore every file except this one
        """
        self.callback = callback
        self.extensions = {ext.lower() for ext in extensions}
        self.only = only.resolve() if only else None
        self.last_modified = {}
        self.debounce_seconds = WatchConstants.DEBOUNCE_SECONDS

    def on_modified(self, event: FileSystemEvent) -> None:
        """Handle file modification events."""
        if event.is_directory:
            return
        self._handle(Path(event.src_path))

    def on_moved(self, event: FileSystemEvent) -> None:
        """REAPER saves through a temp file that is renamed over the project."""
        if event.is_directory:
            return
        self._handle(Path(event.dest_path))

    def _handle(self, file_path: Path) -> None:
        if file_path.suffix.lower() not in self.extensions:
            return
        if self.only is not None and file_path.resolve() != self.only:
            return

        # Debounce: ignore if we just processed this file
        now = time.time()
        last_time = self.last_modified.get(file_path, 0)
        if now - last_time < self.debounce_seconds:
            return
        self.last_modified[file_path] = now

        try:
            self.callback(file_path)
        except Exception:
            # A failed reload must not suppress the next save
            self.last_modified.pop(file_path, None)
            logger.exception(f"Error processing change to {file_path}")


class FileWatcher:
    """
    Watches a directory (or file) for changes to REAPER projects.

    Usage:
        def on_change(file_path):
            print(f"Project changed: {file_path}")

        watcher = FileWatcher(on_change)
        watcher.watch(Path("/path/to/show.rpp"))
        watcher.start()

        # Later...
        watcher.stop()
    """

    def __init__(self, callback: Callable[[Path], None]):
        """
        Initialize the file watcher.

        Args:
            callback: Function to call when a file changes (receives Path object)
        """
        self.callback = callback
        self.observer: Optional[Observer] = None
        self.handler = RPPFileHandler(callback)
        self.watch_path: Optional[Path] = None

    def watch(self, path: Path) -> None:
        """
        Set the path to watch.

        Args:
            path: Directory or file to watch
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Path does not exist: {path}")

        # If it's a file, watch its parent directory for that file only
        if path.is_file():
            self.watch_path = path.parent
            self.handler.only = path.resolve()
        else:
            self.watch_path = path

    def start(self) -> None:
        """Start watching for file changes."""
        if not self.watch_path:
            raise RuntimeError("No watch path set. Call watch() first.")

        if self.observer and self.observer.is_alive():
            raise RuntimeError("Watcher is already running")

        self.observer = Observer()
        self.observer.schedule(self.handler, str(self.watch_path), recursive=False)
        self.observer.start()
        logger.info(f"Watching for changes in: {self.watch_path}")

    def stop(self) -> None:
        """Stop watching for file changes."""
        if self.observer and self.observer.is_alive():
            self.observer.stop()
            self.observer.join()
            logger.info("File watcher stopped")

    def is_running(self) -> bool:
        """Check if the watcher is currently running."""
        return self.observer is not None and self.observer.is_alive()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
