import itertools

import pytest

from src.timber.log_level import LogLevel


def test_rank_order() -> None:
    ordered = [LogLevel.NONE, LogLevel.ERROR, LogLevel.WARN, LogLevel.INFO, LogLevel.DEBUG, LogLevel.VERBOSE]
    assert sorted(reversed(ordered)) == ordered
    assert LogLevel.ERROR < LogLevel.WARN
    assert LogLevel.VERBOSE > LogLevel.DEBUG
    assert LogLevel.INFO <= LogLevel.INFO
    assert LogLevel.INFO >= LogLevel.INFO


def test_order_is_total_and_transitive() -> None:
    levels = list(LogLevel)
    for a, b in itertools.product(levels, repeat=2):
        assert sum([a < b, a == b, a > b]) == 1
    for a, b, c in itertools.product(levels, repeat=3):
        if a < b and b < c:
            assert a < c


def test_compare_with_other_type_raises() -> None:
    with pytest.raises(TypeError):
        LogLevel.INFO < 3


def test_parse_known_labels() -> None:
    assert LogLevel.parse("error") == LogLevel.ERROR
    assert LogLevel.parse("warn") == LogLevel.WARN
    assert LogLevel.parse("info") == LogLevel.INFO
    assert LogLevel.parse("debug") == LogLevel.DEBUG
    assert LogLevel.parse("verbose") == LogLevel.VERBOSE


def test_parse_is_case_insensitive() -> None:
    assert LogLevel.parse("DeBuG") == LogLevel.DEBUG
    assert LogLevel.parse(" Warning ") == LogLevel.WARN


def test_parse_unknown_falls_back_to_none() -> None:
    assert LogLevel.parse("loud") == LogLevel.NONE
    assert LogLevel.parse("") == LogLevel.NONE
    assert LogLevel.parse(None) == LogLevel.NONE
    assert LogLevel.parse(3) == LogLevel.NONE


def test_labels() -> None:
    assert [level.label for level in LogLevel] == ["None", "ERROR", "WARNING", "INFO", "DEBUG", "VERBOSE"]
