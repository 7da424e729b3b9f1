import pytest

from src.timber import timber
from src.timber.log_level import LogLevel
from src.timber.log_message import LogMessage
from src.timber.message_formatter import MessageFormatter


class RecordingSink:
    def __init__(self):
        self.formatter = MessageFormatter("Test")
        self.received = []

    def emit(self, message: LogMessage) -> None:
        self.received.append(message)


@pytest.fixture
def sink(monkeypatch):
    monkeypatch.setattr(timber, "_shared", None)
    recording = RecordingSink()
    timber.add_logger(recording)
    return recording


def test_shared_manager_is_created_once(sink) -> None:
    assert timber.shared_manager() is timber.shared_manager()
    assert timber.shared_manager().sinks == (sink,)


def test_module_functions_capture_caller(sink) -> None:
    timber.log_error("e")
    timber.log_warn("w")
    timber.log_info("i")
    timber.log_debug("d")
    timber.log_verbose("v")
    timber.log("plain")

    assert [m.level for m in sink.received] == [
        LogLevel.ERROR,
        LogLevel.WARN,
        LogLevel.INFO,
        LogLevel.DEBUG,
        LogLevel.VERBOSE,
        LogLevel.INFO,
    ]
    assert {m.file for m in sink.received} == {"test_timber"}
    assert {m.function for m in sink.received} == {"test_module_functions_capture_caller"}


def test_set_log_level(sink) -> None:
    timber.set_log_level(LogLevel.ERROR)
    timber.log_info("dropped")
    timber.log_error("kept")
    assert [m.message for m in sink.received] == ["kept"]


def test_exception_and_trace(sink) -> None:
    timber.log_exception(None)
    timber.log_exception(KeyError("sku"))
    timber.trace()
    assert [m.message for m in sink.received] == ["KeyError: 'sku'", ""]
    assert sink.received[1].function == "test_exception_and_trace"
