import pytest

from mondrianhal import loc_cfg
from mondrianhal.loc_cfg import (
    LOC_MAX_PARAM_LINE,
    LOC_MAX_PARAM_STRING,
    LOC_PARAMETER_TABLE,
    ConfigParam,
    ConfigValue,
    parse_value,
    read_conf,
    set_config_entry,
    trim_space,
)
from mondrianhal.logutil import DEFAULT_DEBUG_LEVEL, LocLogger


@pytest.fixture(autouse=True)
def restore_defaults():
    saved = [(param.value, param.was_set) for param in LOC_PARAMETER_TABLE]
    for param, default in zip(LOC_PARAMETER_TABLE, (DEFAULT_DEBUG_LEVEL, 0)):
        param.value = default
    yield
    for param, (value, was_set) in zip(LOC_PARAMETER_TABLE, saved):
        param.value = value
        param.was_set = was_set


def test_trim_space_strips_both_ends():
    assert trim_space("  \tvalue here \r\n") == "value here"


def test_trim_space_keeps_all_whitespace_text():
    assert trim_space("   ") == "   "
    assert trim_space("") == ""


def test_parse_value_hex():
    value = parse_value("MASK", "0x1F")
    assert value.int_value == 31
    assert value.double_value == 0.0
    assert value.str_value == "0x1F"


def test_parse_value_upper_hex_prefix_matches_lower():
    assert parse_value("A", "0XfF").int_value == parse_value("A", "0xff").int_value


def test_parse_value_decimal_and_float():
    value = parse_value("RATE", "3.5")
    assert value.int_value == 3
    assert value.double_value == 3.5


def test_parse_value_non_numeric_is_zero():
    value = parse_value("NAME", "hello")
    assert value.int_value == 0
    assert value.double_value == 0.0


def test_set_config_entry_types():
    number = ConfigParam("N", "n")
    text = ConfigParam("S", "s")
    real = ConfigParam("F", "f")
    assert set_config_entry(number, parse_value("N", "42"))
    assert set_config_entry(text, parse_value("S", "abc"))
    assert set_config_entry(real, parse_value("F", "1.25"))
    assert number.value == 42 and number.was_set
    assert text.value == "abc" and text.was_set
    assert real.value == 1.25 and real.was_set


def test_set_config_entry_null_string_clears():
    entry = ConfigParam("S", "s", "previous")
    set_config_entry(entry, ConfigValue("S", "NULL"))
    assert entry.value == ""


def test_set_config_entry_truncates_long_string():
    entry = ConfigParam("S", "s")
    set_config_entry(entry, ConfigValue("S", "x" * (LOC_MAX_PARAM_STRING + 20)))
    assert entry.value == "x" * LOC_MAX_PARAM_STRING


def test_set_config_entry_other_name_untouched():
    entry = ConfigParam("N", "n", 5)
    assert set_config_entry(entry, parse_value("OTHER", "9")) is False
    assert entry.value == 5
    assert entry.was_set is False


def test_set_config_entry_bad_type_rejected():
    entry = ConfigParam("X", "q", "keep")
    assert set_config_entry(entry, parse_value("X", "9")) is False
    assert entry.value == "keep"
    assert entry.was_set is False


def test_set_config_entry_none_rejected():
    assert set_config_entry(None, parse_value("X", "1")) is False


def test_read_conf_fills_table_and_logger(tmp_path):
    conf = tmp_path / "gps.conf"
    conf.write_text(
        "# comment line\n"
        "DEBUG_LEVEL = 3\n"
        "TIMESTAMP = 1\n"
        "NAME = hello world\n"
        "RATE=2.5\n"
        "MASK=0x1F\n"
        "no separator here\n"
    )
    name = ConfigParam("NAME", "s")
    rate = ConfigParam("RATE", "f")
    mask = ConfigParam("MASK", "n")
    missing = ConfigParam("MISSING", "n", 7)
    logger = LocLogger()
    assert read_conf(str(conf), [name, rate, mask, missing], logger) is True
    assert name.value == "hello world"
    assert rate.value == 2.5
    assert mask.value == parse_value("MASK", "0x1F").int_value
    assert missing.value == 7 and missing.was_set is False
    assert logger.debug_level == 3
    assert logger.timestamp == 1


def test_read_conf_clears_was_set(tmp_path):
    conf = tmp_path / "empty.conf"
    conf.write_text("UNRELATED=1\n")
    entry = ConfigParam("N", "n", 4, was_set=True)
    read_conf(str(conf), [entry], LocLogger())
    assert entry.was_set is False
    assert entry.value == 4


def test_read_conf_missing_file_uses_defaults(tmp_path):
    logger = LocLogger(debug_level=1, timestamp=1)
    assert read_conf(str(tmp_path / "absent.conf"), [], logger) is False
    assert logger.debug_level == DEFAULT_DEBUG_LEVEL
    assert logger.timestamp == 0


def test_read_conf_splits_long_lines(tmp_path):
    conf = tmp_path / "long.conf"
    conf.write_text("NAME=" + "a" * 100 + "\n")
    entry = ConfigParam("NAME", "s")
    read_conf(str(conf), [entry], LocLogger())
    assert entry.value == "a" * (LOC_MAX_PARAM_LINE - 1 - len("NAME="))


def test_read_conf_skips_repeated_separators(tmp_path):
    conf = tmp_path / "sep.conf"
    conf.write_text("A==5\n=B=6=7\n")
    first = ConfigParam("A", "n")
    second = ConfigParam("B", "n")
    read_conf(str(conf), [first, second], LocLogger())
    assert first.value == 5
    assert second.value == 6


def test_read_conf_debug_level_persists_between_reads(tmp_path):
    first = tmp_path / "first.conf"
    first.write_text("DEBUG_LEVEL=2\n")
    second = tmp_path / "second.conf"
    second.write_text("OTHER=1\n")
    logger = LocLogger()
    read_conf(str(first), None, logger)
    read_conf(str(second), None, logger)
    assert logger.debug_level == 2
    assert loc_cfg.LOC_PARAMETER_TABLE[0].value == 2