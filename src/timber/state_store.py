"""
Small durable key/value store for state that must outlive the process.

Holds the current log file path and the device sink snapshot. Backed by a
single JSON object on disk; last writer wins.
"""

import json
import os
import threading
from pathlib import Path
from typing import Any, Optional

import platformdirs


def default_state_path() -> Path:
    return Path(platformdirs.user_data_dir("Timber")) / "defaults.json"


class StateStore:
    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else default_state_path()
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key in data:
                del data[key]
                self._write(data)

    def _read(self) -> dict[str, Any]:
        # Missing or unreadable state reads as empty.
        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError):
            pass
