"""Enabling and disabling input devices as the screen goes interactive or not."""

from __future__ import annotations

import errno
import logging
import os

_log = logging.getLogger("mondrianhal.power")

MAX_INPUTS = 20
INPUT_PREFIX = "/sys/class/input/input"
NAMES = ("sec_touchscreen", "gpio-keys")
NAME_SIZE = 20

_C_SPACE = " \t\n\v\f\r"


def sysfs_read(path, size):
    """Return at most ``size`` bytes of ``path`` as text, trailing whitespace removed.

    Returns an empty string if the file cannot be opened or read; failures
    other than a missing file are logged.
    """
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError as exc:
        if exc.errno != errno.ENOENT:
            _log.error("Error opening %s: %s", path, exc.strerror)
        return ""
    try:
        data = os.read(fd, size)
    except OSError as exc:
        _log.error("Error reading from %s: %s", path, exc.strerror)
        return ""
    finally:
        os.close(fd)
    return data.decode("latin-1").rstrip(_C_SPACE)


def sysfs_write(path, text):
    """Write ``text`` to the existing file ``path``; failures are logged, not raised."""
    if path is None:
        return
    try:
        fd = os.open(path, os.O_WRONLY)
    except OSError as exc:
        _log.error("Error opening %s: %s", path, exc.strerror)
        return
    try:
        os.write(fd, text.encode("latin-1"))
    except OSError as exc:
        _log.error("Error writing to %s: %s", path, exc.strerror)
    finally:
        os.close(fd)


class InputPower:
    """Switches the touchscreen and key inputs on and off through their ``enabled`` files."""

    def __init__(self, prefix=INPUT_PREFIX):
        self.prefix = prefix
        self.paths = dict.fromkeys(NAMES)
        self._found = False

    def find_paths(self):
        """Look up the ``enabled`` file of each known input device and return the mapping."""
        for index in range(MAX_INPUTS):
            name = sysfs_read(f"{self.prefix}{index}/name", NAME_SIZE)
            if name in self.paths:
                self.paths[name] = f"{self.prefix}{index}/enabled"
                _log.debug("%s => %s", name, self.paths[name])
        return dict(self.paths)

    def set_interactive(self, on):
        """Enable the inputs when ``on`` is true, disable them otherwise."""
        _log.debug("set_interactive: %s input devices", "enabling" if on else "disabling")
        if not self._found:
            self.find_paths()
            self._found = True
        for path in self.paths.values():
            sysfs_write(path, "1" if on else "0")