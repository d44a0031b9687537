import logging

import pytest

from mondrianhal.logutil import (
    DEFAULT_DEBUG_LEVEL,
    ENTRY_TAG,
    EXIT_TAG,
    FROM_AFW,
    LocLogger,
    format_flow,
    get_timestamp,
    log_entry,
    log_exit,
)


def test_logger_defaults_to_unset_level():
    logger = LocLogger()
    assert logger.debug_level == DEFAULT_DEBUG_LEVEL
    assert logger.timestamp == 0


def test_configure_updates_state():
    logger = LocLogger()
    logger.configure(3, 1)
    assert (logger.debug_level, logger.timestamp) == (3, 1)


def test_get_timestamp_format():
    assert get_timestamp(3661.25) == "01:01:01.250000"


def test_get_timestamp_wraps_day():
    assert get_timestamp(86400.0) == get_timestamp(0.0)


@pytest.mark.parametrize("now", [0.0, 12345.5, 99999.999999])
def test_get_timestamp_shape(now):
    stamp = get_timestamp(now)
    assert len(stamp) == 15
    assert stamp[2] == ":" and stamp[5] == ":" and stamp[8] == "."


def test_format_flow_without_timestamp():
    logger = LocLogger(timestamp=0)
    assert format_flow(FROM_AFW, "start", "ok", logger) == f"{FROM_AFW} start ok"


def test_format_flow_with_timestamp():
    logger = LocLogger(timestamp=1)
    line = format_flow(FROM_AFW, "start", "ok", logger, now=0.0)
    assert line == f"[{get_timestamp(0.0)}] {FROM_AFW} start ok"


def test_log_entry_emits(caplog):
    logger = LocLogger()
    with caplog.at_level(logging.DEBUG, logger="mondrianhal.loc"):
        line = log_entry("my_func", logger)
    assert line.startswith(f"{ENTRY_TAG} my_func")
    assert line in caplog.messages


def test_log_exit_carries_value(caplog):
    logger = LocLogger()
    with caplog.at_level(logging.DEBUG, logger="mondrianhal.loc"):
        line = log_exit("my_func", 7, logger)
    assert line == f"{EXIT_TAG} my_func 7"
    assert caplog.messages == [line]