"""Tests for project file watching."""

from unittest.mock import MagicMock, patch

import pytest
from watchdog.events import FileModifiedEvent, FileMovedEvent, DirModifiedEvent

from rppreader.watcher import RPPFileHandler, FileWatcher
from rppreader.workspace import RPPWorkspace


class TestRPPFileHandler:

    def test_calls_back_for_rpp_files(self, tmp_path):
        callback = MagicMock()
        handler = RPPFileHandler(callback)
        handler.on_modified(FileModifiedEvent(str(tmp_path / "show.rpp")))
        callback.assert_called_once_with(tmp_path / "show.rpp")

    def test_ignores_other_extensions(self, tmp_path):
        callback = MagicMock()
        handler = RPPFileHandler(callback)
        handler.on_modified(FileModifiedEvent(str(tmp_path / "show.rpp-bak")))
        handler.on_modified(FileModifiedEvent(str(tmp_path / "render.wav")))
        callback.assert_not_called()

    def test_ignores_directories(self, tmp_path):
        callback = MagicMock()
        RPPFileHandler(callback).on_modified(DirModifiedEvent(str(tmp_path)))
        callback.assert_not_called()

    def test_debounces_repeated_events(self, tmp_path):
        callback = MagicMock()
        handler = RPPFileHandler(callback)
        event = FileModifiedEvent(str(tmp_path / "show.rpp"))
        handler.on_modified(event)
        handler.on_modified(event)
        assert callback.call_count == 1

    def test_rename_over_project_counts_as_change(self, tmp_path):
        callback = MagicMock()
        handler = RPPFileHandler(callback)
        handler.on_moved(FileMovedEvent(str(tmp_path / "show.rpp.tmp"), str(tmp_path / "show.rpp")))
        callback.assert_called_once_with(tmp_path / "show.rpp")

    def test_only_filter(self, tmp_path):
        callback = MagicMock()
        handler = RPPFileHandler(callback, only=tmp_path / "show.rpp")
        handler.on_modified(FileModifiedEvent(str(tmp_path / "other.rpp")))
        callback.assert_not_called()

    def test_callback_errors_are_logged(self, tmp_path, caplog):
        handler = RPPFileHandler(MagicMock(side_effect=ValueError("boom")))
        handler.on_modified(FileModifiedEvent(str(tmp_path / "show.rpp")))
        assert "boom" in caplog.text

    def test_failed_callback_does_not_debounce_next_event(self, tmp_path):
        callback = MagicMock(side_effect=[ValueError("half-written save"), None])
        handler = RPPFileHandler(callback)
        event = FileModifiedEvent(str(tmp_path / "show.rpp"))
        handler.on_modified(event)
        handler.on_modified(event)
        assert callback.call_count == 2


class TestFileWatcher:

    def test_watch_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FileWatcher(MagicMock()).watch(tmp_path / "missing.rpp")

    def test_start_without_watch(self):
        with pytest.raises(RuntimeError, match="No watch path set"):
            FileWatcher(MagicMock()).start()

    def test_watching_a_file_watches_its_directory(self, rpp_file):
        watcher = FileWatcher(MagicMock())
        watcher.watch(rpp_file)
        assert watcher.watch_path == rpp_file.parent
        assert watcher.handler.only == rpp_file.resolve()
        assert watcher.is_running() is False


def test_start_and_stop_context(tmp_path):
    watcher = FileWatcher(MagicMock())
    watcher.watch(tmp_path)
    with watcher:
        assert watcher.is_running() is True
    assert watcher.is_running() is False


class TestWorkspaceWatching:

    def test_requires_loaded_project(self):
        with pytest.raises(RuntimeError, match="No project loaded"):
            RPPWorkspace().start_watching()

    def test_change_triggers_reload(self, rpp_file, sample_text):
        workspace = RPPWorkspace()
        workspace.load_project(rpp_file)
        on_reload = MagicMock()

        with patch("rppreader.workspace.FileWatcher") as watcher_cls:
            workspace.start_watching(on_reload)
            on_change = watcher_cls.call_args[0][0]
            watcher_cls.return_value.watch.assert_called_once_with(rpp_file)
            watcher_cls.return_value.start.assert_called_once()

            rpp_file.write_text(sample_text.replace("RIPPLE 0", "RIPPLE 1"))
            on_change(rpp_file)

            workspace.stop_watching()
            watcher_cls.return_value.stop.assert_called_once()

        changes = on_reload.call_args[0][0]
        assert [c["tag"] for c in changes] == ["RIPPLE"]
        assert workspace.watcher is None
