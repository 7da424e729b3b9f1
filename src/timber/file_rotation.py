"""
Module: file_rotation.py
Location: src/timber/

Active log file selection, size-based rotation and retention purges.

The current file path is kept in the StateStore so that consecutive runs of
the same application keep appending to the same file until it outgrows
max_file_size. Purges run against everything in the logs directory,
including files written by earlier runs.
"""

from __future__ import annotations

import os
import threading
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

import platformdirs

from src.timber.application import application_name
from src.timber.state_store import StateStore

CURRENT_LOG_FILE_KEY = "com.Timber.currentLogFile"
MAXIMUM_LOG_FILE_SIZE = 1024 * 1024  # 1 MiB
MAXIMUM_FILE_AGE_DAYS = 180
MAXIMUM_FILE_COUNT = 5
SECONDS_PER_DAY = 60 * 60 * 24


def default_logs_directory() -> Path:
    return Path(platformdirs.user_cache_dir()) / "Timber"


class LogFileManager:
    """
    Owns the single "current" log file path.

    Responsibilities:
      - Resolve (or allocate) the current path from durable state
      - Rotate to a fresh file once the current one exceeds max_file_size
      - Append formatted lines
      - Run the age and count retention purges
    """

    def __init__(
        self,
        store: StateStore,
        logs_dir: Optional[Path] = None,
        *,
        app_name: Optional[str] = None,
        max_file_size: int = MAXIMUM_LOG_FILE_SIZE,
        extension: str = "log",
        clock: Callable[[], float] = time.time,
    ):
        self._store = store
        self._logs_dir = Path(logs_dir) if logs_dir is not None else default_logs_directory()
        self._app_name = app_name or application_name()
        self._max_file_size = max_file_size
        self._extension = extension.lstrip(".")
        self._clock = clock
        self._lock = threading.RLock()

    @property
    def logs_dir(self) -> Path:
        return self._logs_dir

    # -------------------------------------------------
    # Current path
    # -------------------------------------------------
    def current_path(self) -> Optional[Path]:
        """
        Stored current path, or a freshly allocated one when nothing usable
        is stored. A stored path outside logs_dir is replaced. The logs
        directory is recreated if something wiped it since the last run.
        """
        with self._lock:
            stored = self._store.get(CURRENT_LOG_FILE_KEY)
            if isinstance(stored, str) and stored and Path(stored).parent == self._logs_dir:
                if not self._ensure_logs_dir():
                    return None
                return Path(stored)
            return self.allocate_path()

    def allocate_path(self) -> Optional[Path]:
        """
        Create a new log file name and persist it as current.

        Returns None when the logs directory cannot be created.
        """
        with self._lock:
            if not self._ensure_logs_dir():
                return None

            previous = self._store.get(CURRENT_LOG_FILE_KEY)
            stamp = datetime.fromtimestamp(self._clock(), tz=timezone.utc).strftime("%Y-%m-%d_%H-%M")
            base = f"{self._app_name}_{stamp}"

            path = self._logs_dir / f"{base}.{self._extension}"
            suffix = 0
            while str(path) == previous or path.exists():
                suffix += 1
                path = self._logs_dir / f"{base}-{suffix}.{self._extension}"

            self._store.set(CURRENT_LOG_FILE_KEY, str(path))
            return path

    def should_rotate(self, size: int) -> bool:
        return size > self._max_file_size

    # -------------------------------------------------
    # Append
    # -------------------------------------------------
    def append_line(self, text: str) -> Optional[Path]:
        """
        Append one line to the current file, rotating first if the bytes
        already on disk exceed max_file_size.

        Returns the path written, or None if nothing could be written.
        This method must not raise exceptions outward.
        """
        with self._lock:
            path = self.current_path()
            if path is None:
                return None

            try:
                size = path.stat().st_size
            except OSError:
                size = 0

            if self.should_rotate(size):
                path = self.allocate_path()
                if path is None:
                    return None

            try:
                with path.open("ab") as f:
                    f.write((text + "\n").encode("utf-8"))
            except OSError:
                return None
            return path

    # -------------------------------------------------
    # Retention
    # -------------------------------------------------
    def purge_old_files(self, max_age_days: float = MAXIMUM_FILE_AGE_DAYS) -> list[Path]:
        cutoff = self._clock() - max_age_days * SECONDS_PER_DAY
        return TrashMan.take_out_files_not_modified_since(self._logs_dir, cutoff, extension=self._extension)

    def purge_oldest_files(self, max_count: int = MAXIMUM_FILE_COUNT) -> list[Path]:
        return TrashMan.take_out_oldest_files(self._logs_dir, max_count)

    def _ensure_logs_dir(self) -> bool:
        try:
            self._logs_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            return False
        return True


class TrashMan:
    """
    Deletes log files by age or by count. Filesystem errors are absorbed;
    each call returns the paths it actually removed.
    """

    @staticmethod
    def take_out_files_not_modified_since(
        directory: Path, cutoff: float, extension: Optional[str] = None
    ) -> list[Path]:
        removed: list[Path] = []
        for path in _visible_files(directory):
            if extension is not None and path.suffix.lstrip(".") != extension:
                continue
            try:
                modified = path.stat().st_mtime
            except OSError:
                # No readable date, leave it alone
                continue
            if modified >= cutoff:
                continue
            if _remove(path):
                removed.append(path)
        return removed

    @staticmethod
    def take_out_oldest_files(directory: Path, count: int) -> list[Path]:
        files = _visible_files(directory)
        if len(files) <= count:
            return []

        def sort_key(path: Path) -> tuple[int, float]:
            created = creation_time(path)
            if created is None:
                return (0, 0.0)
            return (1, -created)

        # Newest first; undated files sort ahead of everything.
        ordered = sorted(files, key=sort_key)

        removed: list[Path] = []
        for path in ordered[count:]:
            if _remove(path):
                removed.append(path)
        return removed


def creation_time(path: Path) -> Optional[float]:
    """
    Best available creation time: st_birthtime where the platform reports it,
    otherwise the modification time.
    """
    try:
        st = path.stat()
    except OSError:
        return None
    birth = getattr(st, "st_birthtime", None)
    if birth is not None:
        return birth
    return st.st_mtime


def _visible_files(directory: Path) -> list[Path]:
    try:
        entries = list(Path(directory).iterdir())
    except OSError:
        return []
    files = []
    for entry in entries:
        if entry.name.startswith("."):
            continue
        try:
            if entry.is_file():
                files.append(entry)
        except OSError:
            continue
    return files


def _remove(path: Path) -> bool:
    try:
        os.remove(path)
    except OSError:
        return False
    return True
