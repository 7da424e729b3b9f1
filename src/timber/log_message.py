from __future__ import annotations

import sys
import time
from dataclasses import InitVar, dataclass, field
from pathlib import PurePath

from src.timber.log_level import LogLevel


def source_file_name(path: str) -> str:
    """
    Strip directory and extension from a caller-supplied source path.
    """
    name = PurePath(path).name
    stem, dot, _ = name.rpartition(".")
    return stem if dot and stem else name


def caller_site(depth: int = 1) -> tuple[str, str, int]:
    """
    Return (file, function, line) of the frame `depth` levels above the caller.

    depth=1 is whoever called the function that calls caller_site().
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return ("", "", 0)
    code = frame.f_code
    return (code.co_filename, code.co_name, frame.f_lineno)


@dataclass(frozen=True)
class LogMessage:
    """
    Immutable record of one log event.

    `file` is reduced to the bare source name once, at construction.
    """

    message: str
    level: LogLevel
    timestamp: float = field(default_factory=time.time)
    # Wall-clock epoch seconds, not monotonic.

    file: str = ""
    function: str = ""
    line_number: int = 0

    normalize_file: InitVar[bool] = True
    # Records restored from storage already carry the bare name.

    def __post_init__(self, normalize_file: bool) -> None:
        if normalize_file:
            object.__setattr__(self, "file", source_file_name(self.file))
