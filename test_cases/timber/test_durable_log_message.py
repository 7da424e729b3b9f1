import json

import pytest

from src.timber.durable_log_message import (
    SCHEMA_VERSION,
    DurableLogMessage,
    decode_messages,
    encode_messages,
)
from src.timber.log_level import LogLevel
from src.timber.log_message import LogMessage
from src.timber.timber_exceptions import SnapshotDecodeError


def _message(**overrides) -> LogMessage:
    values = dict(
        message="saved 3 items",
        level=LogLevel.DEBUG,
        timestamp=1709622489.123456,
        file="/src/store/cart.py",
        function="save",
        line_number=88,
    )
    values.update(overrides)
    return LogMessage(**values)


def test_round_trip_through_json_keeps_every_field() -> None:
    original = _message()
    wire = json.loads(json.dumps(encode_messages([original])))
    restored = decode_messages(wire)
    assert restored == [original]
    assert restored[0].timestamp == 1709622489.123456


def test_round_trip_keeps_dotted_file_names() -> None:
    original = _message(file="archive.tar.py")
    assert original.file == "archive.tar"
    restored = DurableLogMessage.from_dict(DurableLogMessage.from_log_message(original).to_dict())
    assert restored.to_log_message() == original


def test_record_layout() -> None:
    record = DurableLogMessage.from_log_message(_message()).to_dict()
    assert record == {
        "v": SCHEMA_VERSION,
        "message": "saved 3 items",
        "level": 4,
        "timestamp": 1709622489.123456,
        "file": "cart",
        "function": "save",
        "line_number": 88,
    }


@pytest.mark.parametrize(
    "record",
    [
        "not a dict",
        {"v": 99},
        {"v": 1, "message": "x"},
        {"v": 1, "message": "x", "level": 42, "timestamp": 1.0, "file": "f", "function": "g", "line_number": 1},
        {"v": 1, "message": "x", "level": 1, "timestamp": "soon", "file": "f", "function": "g", "line_number": 1},
        {"v": 1, "message": None, "level": 1, "timestamp": 1.0, "file": "f", "function": "g", "line_number": 1},
    ],
)
def test_invalid_records_are_rejected(record) -> None:
    with pytest.raises(SnapshotDecodeError):
        DurableLogMessage.from_dict(record)


def test_decode_requires_a_list() -> None:
    with pytest.raises(SnapshotDecodeError):
        decode_messages({"v": 1})


@pytest.mark.parametrize("timestamp", [1e300, float("inf"), float("-inf"), float("nan"), 10**400])
def test_unrenderable_timestamps_are_rejected(timestamp) -> None:
    record = DurableLogMessage.from_log_message(_message()).to_dict()
    record["timestamp"] = timestamp
    with pytest.raises(SnapshotDecodeError):
        DurableLogMessage.from_dict(record)
