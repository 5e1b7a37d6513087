"""Background indexing of the regular files below a directory."""

from __future__ import annotations

import abc
import os
import threading
from pathlib import Path


class DirectoryIndexListener(abc.ABC):
    """Receives the outcome of an index build, from the worker thread."""

    @abc.abstractmethod
    def on_index_build_completed(self) -> None:
        """Called when the build finished."""

    @abc.abstractmethod
    def on_index_build_canceled(self) -> None:
        """Called when the build was stopped before finishing."""


class DirectoryIndex:
    """Collects file paths below a base directory in a worker thread."""

    def __init__(self, listener: DirectoryIndexListener | None = None) -> None:
        self.listener = listener
        self._stop = threading.Event()
        self._indexed = False
        self._files: list[Path] = []
        self._current_dir = Path()
        self._thread: threading.Thread | None = None

    def __enter__(self) -> "DirectoryIndex":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()

    @property
    def current_dir(self) -> Path:
        return self._current_dir

    def init(self, base_path: str | os.PathLike[str]) -> None:
        """Set the directory to index and forget the previous index."""
        self._current_dir = Path(base_path)
        self._files = []

    def build(self) -> None:
        """Start indexing, unless a build is already running or not yet joined."""
        if self._thread is not None:
            return
        self._stop.clear()
        self._indexed = False
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def cancel(self) -> None:
        """Ask the running build to stop and wait for it."""
        self._stop.set()
        self._join()

    def file_index(self) -> list[Path]:
        """Wait for the build to finish and return the indexed files."""
        self._join()
        return list(self._files)

    def is_indexing(self) -> bool:
        return not self._indexed

    def _join(self) -> None:
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _run(self) -> None:
        complete = self._walk(self._current_dir)
        self._indexed = True
        if self.listener is not None:
            if complete:
                self.listener.on_index_build_completed()
            else:
                self.listener.on_index_build_canceled()

    def _walk(self, path: Path) -> bool:
        try:
            entries = os.scandir(path)
        except OSError:
            return not self._stop.is_set()
        with entries:
            for entry in entries:
                if self._stop.is_set():
                    return False
                try:
                    if entry.is_dir():
                        if not entry.name.startswith("."):
                            self._walk(Path(entry.path))
                    elif entry.is_file():
                        self._files.append(Path(entry.path))
                except OSError:
                    pass
        return not self._stop.is_set()