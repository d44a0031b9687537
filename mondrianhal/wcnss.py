"""Reading the WLAN MAC address stored by the factory on the EFS partition."""

from __future__ import annotations

import logging
import string

_log = logging.getLogger("mondrianhal.wcnss")

MAC_INFO_FILE = "/efs/wifi/.mac.info"
MAC_LEN = 6

_HEX = set(string.hexdigits)
_C_SPACE = " \t\n\v\f\r"


def _parse_mac(text):
    """Parse six ``XX`` hex fields separated by colons at the start of ``text``."""
    octets = []
    pos = 0
    for index in range(MAC_LEN):
        if index:
            if text[pos:pos + 1] != ":":
                raise ValueError("MAC address fields must be separated by ':'")
            pos += 1
        while pos < len(text) and text[pos] in _C_SPACE:
            pos += 1
        end = pos
        while end < len(text) and end - pos < 2 and text[end] in _HEX:
            end += 1
        if end == pos:
            raise ValueError("MAC address field is not hexadecimal")
        octets.append(int(text[pos:end], 16))
        pos = end
    return bytes(octets)


def get_wlan_address(path=MAC_INFO_FILE):
    """Return the six bytes of the MAC address written as ``XX:XX:XX:XX:XX:XX`` in ``path``.

    Raises OSError if the file cannot be opened and ValueError if its
    contents are not a valid address.
    """
    try:
        with open(path, "r", encoding="latin-1") as handle:
            text = handle.read()
    except OSError:
        _log.error("get_wlan_address: failed to open %s", path)
        raise
    try:
        return _parse_mac(text)
    except ValueError:
        _log.error("get_wlan_address: %s: file contents are not valid", path)
        raise