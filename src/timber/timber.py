"""
Module-level logging functions backed by one process-wide LogManager.

The shared manager is created on first use and lives for the rest of the
process. Code that wants isolation (tests, embedded hosts) should build its
own LogManager and pass it around instead.
"""

from __future__ import annotations

import threading
from typing import Optional

from src.timber.log_level import LogLevel
from src.timber.log_manager import LogManager, LogSink
from src.timber.log_message import caller_site

_shared: Optional[LogManager] = None
_shared_lock = threading.Lock()


def shared_manager() -> LogManager:
    global _shared
    with _shared_lock:
        if _shared is None:
            _shared = LogManager()
        return _shared


def set_log_level(level: LogLevel) -> None:
    shared_manager().set_level(level)


def add_logger(sink: LogSink) -> None:
    shared_manager().add_sink(sink)


def _site() -> dict:
    # Frame of whoever called the public function below.
    file, function, line = caller_site(2)
    return {"file": file, "function": function, "line": line}


def log_error(text: str) -> None:
    shared_manager().error(text, **_site())


def log_warn(text: str) -> None:
    shared_manager().warn(text, **_site())


def log_info(text: str) -> None:
    shared_manager().info(text, **_site())


def log_debug(text: str) -> None:
    shared_manager().debug(text, **_site())


def log_verbose(text: str) -> None:
    shared_manager().verbose(text, **_site())


def log(text: str) -> None:
    shared_manager().info(text, **_site())


def log_exception(exc: Optional[BaseException]) -> None:
    shared_manager().log_exception(exc, **_site())


def trace() -> None:
    shared_manager().trace(**_site())
