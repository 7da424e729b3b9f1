import threading
import time
from typing import Optional, Protocol

from src.timber.log_level import LogLevel
from src.timber.log_message import LogMessage, caller_site
from src.timber.message_formatter import MessageFormatterType


class LogSink(Protocol):
    """
    Destination for log messages.

    A LogSink may print them, write them to disk, post them
    to a server, or keep them in memory for a viewer.
    """

    formatter: MessageFormatterType

    def emit(self, message: LogMessage) -> None:
        """
        Receive a log message for processing.

        Must not raise exceptions outward.
        """


class LogManager:
    """
    Central dispatcher for log messages.

    Holds the active level and the registered sinks. Messages less
    restrictive than the level are dropped; everything else goes to every
    sink, in registration order, on the caller's thread.
    """

    def __init__(self, *, level: LogLevel = LogLevel.VERBOSE):
        self._level = level
        self._sinks: list[LogSink] = []
        self._lock = threading.RLock()

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def sinks(self) -> tuple:
        with self._lock:
            return tuple(self._sinks)

    def set_level(self, level: LogLevel) -> None:
        self._level = level

    def add_sink(self, sink: LogSink) -> None:
        """
        Register a sink. Duplicates are allowed; there is no removal.
        """
        with self._lock:
            self._sinks.append(sink)

    def accepts(self, level: LogLevel) -> bool:
        return level <= self._level

    def log(self, message: LogMessage) -> None:
        if not self.accepts(message.level):
            return

        for sink in self.sinks:
            try:
                sink.emit(message)
            except Exception:
                # One broken sink must not starve the others.
                pass

    # -------------------------------------------------
    # Convenience entry points
    # -------------------------------------------------
    def error(self, text: str, *, file: Optional[str] = None, function: Optional[str] = None,
              line: Optional[int] = None) -> None:
        self._submit(LogLevel.ERROR, text, file, function, line)

    def warn(self, text: str, *, file: Optional[str] = None, function: Optional[str] = None,
             line: Optional[int] = None) -> None:
        self._submit(LogLevel.WARN, text, file, function, line)

    def info(self, text: str, *, file: Optional[str] = None, function: Optional[str] = None,
             line: Optional[int] = None) -> None:
        self._submit(LogLevel.INFO, text, file, function, line)

    def debug(self, text: str, *, file: Optional[str] = None, function: Optional[str] = None,
              line: Optional[int] = None) -> None:
        self._submit(LogLevel.DEBUG, text, file, function, line)

    def verbose(self, text: str, *, file: Optional[str] = None, function: Optional[str] = None,
                line: Optional[int] = None) -> None:
        self._submit(LogLevel.VERBOSE, text, file, function, line)

    def log_exception(self, exc: Optional[BaseException], *, file: Optional[str] = None,
                      function: Optional[str] = None, line: Optional[int] = None) -> None:
        """Log an exception at ERROR. None is ignored."""
        if exc is None:
            return
        self._submit(LogLevel.ERROR, f"{type(exc).__name__}: {exc}", file, function, line)

    def trace(self, *, file: Optional[str] = None, function: Optional[str] = None,
              line: Optional[int] = None) -> None:
        """Mark that execution passed through the caller."""
        self._submit(LogLevel.INFO, "", file, function, line)

    def _submit(
        self,
        level: LogLevel,
        text: str,
        file: Optional[str],
        function: Optional[str],
        line: Optional[int],
        depth: int = 2,
    ) -> None:
        # depth=2 skips _submit and the public entry point.
        if file is None or function is None or line is None:
            caller_file, caller_function, caller_line = caller_site(depth)
            file = caller_file if file is None else file
            function = caller_function if function is None else function
            line = caller_line if line is None else line

        self.log(
            LogMessage(
                message=text,
                level=level,
                timestamp=time.time(),
                file=file,
                function=function,
                line_number=line,
            )
        )
