"""Location-service logging helpers: logger state, timestamps and call-flow lines."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

_log = logging.getLogger("mondrianhal.loc")

VOID_RET = "None"
FROM_AFW = "===>"
TO_MODEM = "--->"
FROM_MODEM = "<---"
TO_AFW = "<==="
EXIT_TAG = "Exiting"
ENTRY_TAG = "Entering"
BOOL_STR = ("False", "True")

DEFAULT_DEBUG_LEVEL = 0xFF


@dataclass
class LocLogger:
    """Debug level and timestamp switch shared by the location utilities."""

    debug_level: int = DEFAULT_DEBUG_LEVEL
    timestamp: int = 0

    def configure(self, debug_level, timestamp):
        """Set the debug level and whether call-flow lines carry a timestamp."""
        self.debug_level = int(debug_level)
        self.timestamp = int(timestamp)


loc_logger = LocLogger()


def get_timestamp(now=None):
    """Return ``HH:MM:SS.uuuuuu`` for ``now`` (seconds since the epoch, UTC)."""
    if now is None:
        now = time.time()
    seconds = int(now)
    micros = int(round((now - seconds) * 1_000_000))
    if micros >= 1_000_000:
        seconds += 1
        micros -= 1_000_000
    hours = seconds // 3600 % 24
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{micros:06d}"


def format_flow(tag, what, value, logger=None, now=None):
    """Build a call-flow log line, prefixed by a timestamp when enabled."""
    logger = loc_logger if logger is None else logger
    message = f"{tag} {what} {value}"
    if logger.timestamp:
        return f"[{get_timestamp(now)}] {message}"
    return message


def log_entry(func_name, logger=None):
    """Log and return the line marking entry into ``func_name``."""
    message = format_flow(ENTRY_TAG, func_name, "", logger)
    _log.debug(message)
    return message


def log_exit(func_name, value, logger=None):
    """Log and return the line marking exit from ``func_name`` with ``value``."""
    message = format_flow(EXIT_TAG, func_name, value, logger)
    _log.debug(message)
    return message