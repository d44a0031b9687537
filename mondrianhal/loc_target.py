"""Detection of the GNSS target (modem layout) from system properties and sysfs."""

from __future__ import annotations

import enum
import logging
import os
import time

_log = logging.getLogger("mondrianhal.loc_target")


class GnssTarget(enum.IntEnum):
    """Where the GNSS engine lives."""

    NONE = 0
    MSM = 1
    GSS = 2
    MDM = 3
    QCA1530 = 4
    UNKNOWN = 5


class SscType(enum.IntEnum):
    """Whether a sensor subsystem core is present."""

    NO_SSC = 0
    HAS_SSC = 1


def target_set(gnss, ssc):
    """Combine a GNSS type and an SSC flag into a target code."""
    return (int(gnss) << 1) | int(ssc)


def gnss_type(target):
    """Return the GNSS type part of a target code."""
    return int(target) >> 1


TARGET_DEFAULT = target_set(GnssTarget.MSM, SscType.HAS_SSC)
TARGET_MDM = target_set(GnssTarget.MDM, SscType.HAS_SSC)
TARGET_APQ_SA = target_set(GnssTarget.GSS, SscType.NO_SSC)
TARGET_MPQ = target_set(GnssTarget.NONE, SscType.NO_SSC)
TARGET_MSM_NO_SSC = target_set(GnssTarget.MSM, SscType.NO_SSC)
TARGET_QCA1530 = target_set(GnssTarget.QCA1530, SscType.NO_SSC)
TARGET_UNKNOWN = target_set(GnssTarget.UNKNOWN, SscType.NO_SSC)
TARGET_INVALID = 0xFFFFFFFF

APQ8064_ID_1 = "109"
APQ8064_ID_2 = "153"
MPQ8064_ID_1 = "130"
MSM8930_ID_1 = "142"
MSM8930_ID_2 = "116"
APQ8030_ID_1 = "157"
APQ8074_ID_1 = "184"

LINE_LEN = 100
STR_LIQUID = "Liquid"
STR_SURF = "Surf"
STR_MTP = "MTP"
STR_APQ = "apq"

QCA1530_PROPERTY = "persist.qca1530"
QCA1530_DETECT_TIMEOUT = 30
QCA1530_DETECT_PRESENT = "yes"
QCA1530_DETECT_PROGRESS = "detect"

HW_PLATFORM = "/sys/devices/soc0/hw_platform"
SOC_ID = "/sys/devices/soc0/soc_id"
HW_PLATFORM_DEP = "/sys/devices/system/soc/soc0/hw_platform"
SOC_ID_DEP = "/sys/devices/system/soc/soc0/id"
MDM_DEVICE = "/dev/mdm"


def read_a_line(path, line_size=LINE_LEN):
    """Return the first line of ``path``, at most ``line_size - 1`` characters.

    The line keeps its end-of-line characters. Raises OSError if the file
    cannot be opened.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as handle:
            line = handle.readline(max(line_size - 1, 0))
    except OSError as exc:
        _log.error("open failed: %s: %s", path, exc.strerror)
        raise
    _log.debug("cat %s: %s", path, line)
    return line


def _is_word(line, word):
    """True if ``line`` starts with ``word`` followed by the end of the string or line."""
    if not line.startswith(word):
        return False
    rest = line[len(word):len(word) + 1]
    return rest in ("", "\n", "\r")


class TargetDetector:
    """Works out the target code once and remembers it."""

    def __init__(self, properties=None, root="/", sleep=time.sleep):
        self.properties = {} if properties is None else properties
        self.root = root
        self._sleep = sleep
        self._target = TARGET_INVALID

    def _path(self, path):
        return os.path.join(self.root, path.lstrip("/"))

    def _read_or_empty(self, path):
        try:
            return read_a_line(self._path(path))
        except OSError:
            return ""

    def is_qca1530(self):
        """True if the QCA1530 SoC is reported present, waiting while detection runs."""
        present = False
        for _ in range(QCA1530_DETECT_TIMEOUT):
            value = self.properties.get(QCA1530_PROPERTY, "")
            _log.debug("qca1530: property %s is set to %s", QCA1530_PROPERTY, value)
            if value == QCA1530_DETECT_PRESENT:
                present = True
                break
            if value == QCA1530_DETECT_PROGRESS:
                _log.debug("qca1530: SoC detection is in progress.")
                self._sleep(1)
                continue
            break
        _log.debug("qca1530: detected=%s", "true" if present else "false")
        return present

    def get_target(self):
        """Return the target code, detecting it on the first successful call.

        Returns TARGET_INVALID, without remembering it, when the platform
        names an MDM board but the MDM device cannot be read.
        """
        if self._target != TARGET_INVALID:
            return self._target

        target = TARGET_INVALID
        if self.is_qca1530():
            target = TARGET_QCA1530
        else:
            baseband = self.properties.get("ro.baseband", "")
            platform_path = HW_PLATFORM if os.path.exists(self._path(HW_PLATFORM)) else HW_PLATFORM_DEP
            id_path = SOC_ID if os.path.exists(self._path(SOC_ID)) else SOC_ID_DEP
            hw_platform = self._read_or_empty(platform_path)
            soc_id = self._read_or_empty(id_path)

            if baseband.startswith(STR_APQ):
                target = TARGET_MPQ if _is_word(soc_id, MPQ8064_ID_1) else TARGET_APQ_SA
            elif any(_is_word(hw_platform, word) for word in (STR_LIQUID, STR_SURF, STR_MTP)):
                try:
                    read_a_line(self._path(MDM_DEVICE))
                except OSError:
                    pass
                else:
                    target = TARGET_MDM
            elif _is_word(soc_id, MSM8930_ID_1) or _is_word(soc_id, MSM8930_ID_2):
                target = TARGET_MSM_NO_SSC
            else:
                target = TARGET_UNKNOWN

        self._target = target
        _log.debug("HAL: get_target returned %d", target)
        return target