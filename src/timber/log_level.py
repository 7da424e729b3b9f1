from enum import Enum


class LogLevel(Enum):
    """
    Ordered severity level for log messages.

    Lower rank is more restrictive. A manager set to INFO accepts
    ERROR, WARN and INFO messages and drops DEBUG and VERBOSE.
    """

    NONE = 0        # Nothing gets through
    ERROR = 1       # Operation failed
    WARN = 2        # Unexpected but recoverable condition
    INFO = 3        # Normal operation
    DEBUG = 4       # Developer-focused diagnostic information
    VERBOSE = 5     # Everything

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, text) -> "LogLevel":
        """
        Map a configuration string to a level.

        Unknown values fall back to NONE. Never raises.
        """
        if not isinstance(text, str):
            return cls.NONE
        return _PARSE_TABLE.get(text.strip().lower(), cls.NONE)

    def __lt__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value >= other.value


_LABELS = {
    LogLevel.NONE: "None",
    LogLevel.ERROR: "ERROR",
    LogLevel.WARN: "WARNING",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.VERBOSE: "VERBOSE",
}

_PARSE_TABLE = {
    "none": LogLevel.NONE,
    "error": LogLevel.ERROR,
    "warn": LogLevel.WARN,
    "warning": LogLevel.WARN,
    "info": LogLevel.INFO,
    "debug": LogLevel.DEBUG,
    "verbose": LogLevel.VERBOSE,
}
