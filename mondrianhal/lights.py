"""Backlight and touch-key button lights driven through sysfs brightness files."""

from __future__ import annotations

import functools
import logging
import os
import threading

_log = logging.getLogger("mondrianhal.lights")

PANEL_FILE = "/sys/class/leds/lcd-backlight/brightness"
BUTTON_FILE = "/sys/class/sec/sec_touchkey/brightness"

LIGHT_ID_BACKLIGHT = "backlight"
LIGHT_ID_BUTTONS = "buttons"
LIGHT_ID_BATTERY = "battery"
LIGHT_ID_NOTIFICATIONS = "notifications"
LIGHT_ID_ATTENTION = "attention"

MODULE_NAME = "Mondrianwifi Lights Module"


def rgb_to_brightness(color):
    """Return the 0-255 luminance of an ``0xAARRGGBB`` colour; alpha is ignored."""
    color = int(color) & 0x00FFFFFF
    red = (color >> 16) & 0xFF
    green = (color >> 8) & 0xFF
    blue = color & 0xFF
    return (77 * red + 150 * green + 29 * blue) >> 8


def is_lit(color):
    """True if any of the red, green or blue channels of ``color`` is non-zero."""
    return bool(int(color) & 0x00FFFFFF)


def write_int(path, value):
    """Write ``value`` followed by a newline to the existing file ``path``.

    Raises OSError if the file cannot be opened or written.
    """
    _log.debug("write_int: path %s, value %d", path, value)
    try:
        fd = os.open(path, os.O_RDWR)
    except OSError:
        _log.error("write_int failed to open %s", path)
        raise
    try:
        os.write(fd, f"{int(value)}\n".encode("ascii"))
    finally:
        os.close(fd)


class Lights:
    """The lights of the device: the panel backlight and the touch-key buttons.

    Battery, notification and attention lights have no hardware; the colour
    last requested for each is kept in ``unbacked`` and nothing is written.
    """

    def __init__(self, panel_file=PANEL_FILE, button_file=BUTTON_FILE):
        self.panel_file = panel_file
        self.button_file = button_file
        self.unbacked = {}
        self._lock = threading.Lock()

    def open(self, name):
        """Return the function that sets the light called ``name``.

        Raises ValueError for a light this device does not have.
        """
        if name == LIGHT_ID_BACKLIGHT:
            return self.set_backlight
        if name == LIGHT_ID_BUTTONS:
            return self.set_buttons
        if name in (LIGHT_ID_BATTERY, LIGHT_ID_NOTIFICATIONS, LIGHT_ID_ATTENTION):
            return functools.partial(self._set_unbacked, name)
        raise ValueError(f"unknown light: {name!r}")

    def set_backlight(self, color):
        """Set the panel brightness from the luminance of ``color``."""
        brightness = rgb_to_brightness(color)
        with self._lock:
            write_int(self.panel_file, brightness)

    def set_buttons(self, color):
        """Turn the button lights on for any non-black ``color``, off otherwise."""
        on = 1 if is_lit(color) else 0
        with self._lock:
            write_int(self.button_file, on)

    def _set_unbacked(self, name, color):
        """Remember the colour asked of a light that has no hardware behind it."""
        with self._lock:
            self.unbacked[name] = int(color) & 0xFFFFFFFF