"""
Versioned storage schema for log messages kept across process restarts.

Record layout (SCHEMA_VERSION 1):

    {"v": 1, "message": str, "level": int, "timestamp": float,
     "file": str, "function": str, "line_number": int}

`level` is the LogLevel rank. Timestamps are stored as the raw float so
sub-second precision survives a JSON round trip unchanged.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable

from src.timber.log_level import LogLevel
from src.timber.log_message import LogMessage
from src.timber.timber_exceptions import SnapshotDecodeError

SCHEMA_VERSION = 1


@dataclass
class DurableLogMessage:
    """Mutable mirror of LogMessage used only by the persistence layer."""

    message: str
    level: LogLevel
    timestamp: float
    file: str
    function: str
    line_number: int

    @classmethod
    def from_log_message(cls, msg: LogMessage) -> "DurableLogMessage":
        return cls(
            message=msg.message,
            level=msg.level,
            timestamp=msg.timestamp,
            file=msg.file,
            function=msg.function,
            line_number=msg.line_number,
        )

    def to_log_message(self) -> LogMessage:
        return LogMessage(
            message=self.message,
            level=self.level,
            timestamp=self.timestamp,
            file=self.file,
            function=self.function,
            line_number=self.line_number,
            normalize_file=False,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "v": SCHEMA_VERSION,
            "message": self.message,
            "level": self.level.value,
            "timestamp": self.timestamp,
            "file": self.file,
            "function": self.function,
            "line_number": self.line_number,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "DurableLogMessage":
        """
        Rebuild a record, enforcing the schema.

        Raises SnapshotDecodeError on anything that is not a version 1 record.
        """
        if not isinstance(data, dict):
            raise SnapshotDecodeError("record is not an object", data)
        if data.get("v") != SCHEMA_VERSION:
            raise SnapshotDecodeError(f"unsupported schema version: {data.get('v')!r}", data)

        required = ["message", "level", "timestamp", "file", "function", "line_number"]
        missing = [k for k in required if k not in data]
        if missing:
            raise SnapshotDecodeError(f"missing fields: {missing}", data)

        try:
            level = LogLevel(data["level"])
        except ValueError as e:
            raise SnapshotDecodeError(f"invalid level: {data['level']!r}", data) from e

        if not isinstance(data["timestamp"], (int, float)) or isinstance(data["timestamp"], bool):
            raise SnapshotDecodeError("timestamp must be a number", data)
        if not _is_renderable_timestamp(data["timestamp"]):
            raise SnapshotDecodeError(f"timestamp out of range: {data['timestamp']!r}", data)
        if not isinstance(data["line_number"], int) or isinstance(data["line_number"], bool):
            raise SnapshotDecodeError("line_number must be an integer", data)
        for key in ("message", "file", "function"):
            if not isinstance(data[key], str):
                raise SnapshotDecodeError(f"{key} must be a string", data)

        return cls(
            message=data["message"],
            level=level,
            timestamp=float(data["timestamp"]),
            file=data["file"],
            function=data["function"],
            line_number=data["line_number"],
        )


def encode_messages(messages: Iterable[LogMessage]) -> list[dict[str, Any]]:
    return [DurableLogMessage.from_log_message(m).to_dict() for m in messages]


def decode_messages(records: Any) -> list[LogMessage]:
    if not isinstance(records, list):
        raise SnapshotDecodeError("snapshot is not a list", records)
    return [DurableLogMessage.from_dict(r).to_log_message() for r in records]


def _is_renderable_timestamp(timestamp) -> bool:
    try:
        if not math.isfinite(timestamp):
            return False
        datetime.fromtimestamp(timestamp)
    except (OverflowError, OSError, ValueError):
        return False
    return True
