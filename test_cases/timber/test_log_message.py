import dataclasses

import pytest

from src.timber.log_level import LogLevel
from src.timber.log_message import LogMessage, caller_site, source_file_name


def test_file_is_reduced_to_bare_name() -> None:
    msg = LogMessage("hi", LogLevel.INFO, 1.0, "/app/screens/login_view.py", "load", 12)
    assert msg.file == "login_view"
    assert msg.function == "load"
    assert msg.line_number == 12


def test_source_file_name_edge_cases() -> None:
    assert source_file_name("module") == "module"
    assert source_file_name("a/b/archive.tar.gz") == "archive.tar"
    assert source_file_name(".hidden") == ".hidden"
    assert source_file_name("") == ""


def test_message_is_immutable() -> None:
    msg = LogMessage("hi", LogLevel.INFO, file="x.py")
    with pytest.raises(dataclasses.FrozenInstanceError):
        msg.file = "other"


def test_restored_file_is_kept_as_is() -> None:
    msg = LogMessage("hi", LogLevel.INFO, file="archive.tar", normalize_file=False)
    assert msg.file == "archive.tar"


def _where_am_i():
    return caller_site(1)


def test_caller_site_reports_calling_frame() -> None:
    file, function, line = _where_am_i()
    assert file.endswith("test_log_message.py")
    assert function == "test_caller_site_reports_calling_frame"
    assert line > 0
