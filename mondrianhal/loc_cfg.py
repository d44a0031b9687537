"""Reading ``NAME = value`` configuration files into typed parameter tables."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional

from mondrianhal.logutil import LocLogger, loc_logger

_log = logging.getLogger("mondrianhal.loc_cfg")

LOC_MAX_PARAM_NAME = 48
LOC_MAX_PARAM_STRING = 80
LOC_MAX_PARAM_LINE = 80

PARAM_TYPES = ("n", "s", "f")

_C_SPACE = " \t\n\v\f\r"
_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_HEX_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return _to_int32(int(match.group(1))) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _strtol_hex(text: str) -> int:
    match = _HEX_RE.match(text)
    if not match or not match.group(2):
        return 0
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value
    return min(max(value, _LONG_MIN), _LONG_MAX)


def _default_value(param_type: str) -> Any:
    return {"n": 0, "s": "", "f": 0.0}.get(param_type)


@dataclass
class ConfigParam:
    """One entry of a configuration table: a name, a type and the value it holds.

    ``param_type`` is ``'n'`` for an integer, ``'s'`` for a string and ``'f'``
    for a float. ``was_set`` tells whether the last file read assigned it.
    """

    name: str
    param_type: str
    value: Any = None
    was_set: bool = False

    def __post_init__(self):
        if self.value is None:
            self.value = _default_value(self.param_type)


@dataclass
class ConfigValue:
    """A parsed ``name = value`` line in all its interpretations."""

    name: str
    str_value: str
    int_value: int = 0
    double_value: float = 0.0


LOC_PARAMETER_TABLE = (
    ConfigParam("DEBUG_LEVEL", "n", 0xFF),
    ConfigParam("TIMESTAMP", "n", 0),
)


def _lookup_default(name: str) -> int:
    return next(param.value for param in LOC_PARAMETER_TABLE if param.name == name)


def trim_space(text):
    """Remove leading and trailing whitespace; text made only of whitespace is kept as is."""
    stripped = text.strip(_C_SPACE)
    return stripped if stripped else text


def parse_value(name, raw):
    """Interpret ``raw`` as a string, an integer and a float.

    A value starting with ``0x`` is read as hexadecimal and leaves the float
    at zero; anything else is read as a decimal integer and a float, taking
    the longest leading part that parses and zero if none does.
    """
    value = ConfigValue(name=name, str_value=raw)
    if len(raw) > 1 and raw[0] == "0" and raw[1].lower() == "x":
        value.int_value = _to_int32(_strtol_hex(raw[2:]))
    else:
        value.double_value = _atof(raw)
        value.int_value = _atoi(raw)
    return value


def set_config_entry(entry, value):
    """Store ``value`` in ``entry`` if their names match; return whether it was stored."""
    if entry is None or value is None:
        _log.error("set_config_entry: invalid config entry or parameter")
        return False
    if entry.name != value.name:
        return False

    if entry.param_type == "s":
        if value.str_value == "NULL":
            entry.value = ""
        else:
            entry.value = value.str_value[:LOC_MAX_PARAM_STRING]
        _log.debug("set_config_entry: PARAM %s = %s", entry.name, entry.value)
    elif entry.param_type == "n":
        entry.value = value.int_value
        _log.debug("set_config_entry: PARAM %s = %d", entry.name, entry.value)
    elif entry.param_type == "f":
        entry.value = value.double_value
        _log.debug("set_config_entry: PARAM %s = %f", entry.name, entry.value)
    else:
        _log.error("set_config_entry: PARAM %s parameter type must be n, f, or s", entry.name)
        return False
    entry.was_set = True
    return True


def _chunks(handle) -> Iterator[str]:
    """Yield the file in pieces of at most one line and ``LOC_MAX_PARAM_LINE - 1`` characters."""
    while True:
        piece = handle.readline(LOC_MAX_PARAM_LINE - 1)
        if not piece:
            return
        yield piece


def _split_line(line: str) -> Optional[tuple[str, str]]:
    tokens = [token for token in line.split("=") if token]
    if len(tokens) < 2:
        return None
    return tokens[0], tokens[1]


def _init_logger(logger: LocLogger) -> None:
    logger.configure(_lookup_default("DEBUG_LEVEL") & 0xFF, _lookup_default("TIMESTAMP") & 0xFF)


def read_conf(path, table=None, logger=None):
    """Read the configuration file at ``path`` into ``table`` and the logging parameters.

    Every entry of ``table`` first has ``was_set`` cleared. Lines without two
    ``=``-separated parts are skipped. The logger is then configured from the
    ``DEBUG_LEVEL`` and ``TIMESTAMP`` values. Returns False if the file could
    not be opened, True otherwise.
    """
    logger = loc_logger if logger is None else logger
    entries: Iterable[ConfigParam] = () if table is None else table
    try:
        handle = open(path, "r", encoding="latin-1", newline="")
    except OSError:
        _log.warning("read_conf: no %s file found", path)
        _init_logger(logger)
        return False

    _log.debug("read_conf: using %s", path)
    entries = list(entries)
    for entry in entries:
        entry.was_set = False

    with handle:
        for line in _chunks(handle):
            parts = _split_line(line)
            if parts is None:
                continue
            value = parse_value(trim_space(parts[0]), trim_space(parts[1]))
            for entry in entries:
                set_config_entry(entry, value)
            for entry in LOC_PARAMETER_TABLE:
                set_config_entry(entry, value)

    _init_logger(logger)
    return True