"""Name lookups and time strings used in location-service log lines."""

from __future__ import annotations

import time

from mondrianhal.loc_target import GnssTarget, SscType, gnss_type
from mondrianhal.msg_q import MsgQStatus

UNKNOWN_STR = "UNKNOWN"

MSG_Q_STATUS_TABLE = (
    ("eMSG_Q_SUCCESS", MsgQStatus.SUCCESS),
    ("eMSG_Q_FAILURE_GENERAL", MsgQStatus.FAILURE_GENERAL),
    ("eMSG_Q_INVALID_PARAMETER", MsgQStatus.INVALID_PARAMETER),
    ("eMSG_Q_INVALID_HANDLE", MsgQStatus.INVALID_HANDLE),
    ("eMSG_Q_UNAVAILABLE_RESOURCE", MsgQStatus.UNAVAILABLE_RESOURCE),
    ("eMSG_Q_INSUFFICIENT_BUFFER", MsgQStatus.INSUFFICIENT_BUFFER),
)

TARGET_NAME_TABLE = (
    ("GNSS_NONE", GnssTarget.NONE),
    ("GNSS_MSM", GnssTarget.MSM),
    ("GNSS_GSS", GnssTarget.GSS),
    ("GNSS_MDM", GnssTarget.MDM),
    ("GNSS_QCA1530", GnssTarget.QCA1530),
    ("GNSS_UNKNOWN", GnssTarget.UNKNOWN),
)


def name_from_mask(table, mask):
    """Return the first name in ``table`` whose value shares a bit with ``mask``."""
    return next((name for name, value in table if int(value) & int(mask)), UNKNOWN_STR)


def name_from_val(table, value):
    """Return the first name in ``table`` whose value equals ``value``."""
    return next((name for name, val in table if int(val) == int(value)), UNKNOWN_STR)


def msg_q_status_name(status):
    """Return the name of a message-queue status code."""
    return name_from_val(MSG_Q_STATUS_TABLE, status)


def succ_fail_string(is_succ):
    return "successful" if is_succ else "failed"


def target_name(target):
    """Describe a target code, e.g. ``" GNSS_MSM with SSC"``."""
    index = gnss_type(target)
    if index < 0 or index >= len(TARGET_NAME_TABLE):
        index = len(TARGET_NAME_TABLE) - 1
    name = name_from_val(TARGET_NAME_TABLE, index)
    if int(target) & SscType.HAS_SSC == SscType.HAS_SSC:
        return f" {name} with SSC"
    return f" {name}  without SSC"


def get_time(now=None):
    """Return the local time of ``now`` as ``HH:MM:SS.mmm``."""
    if now is None:
        now = time.time()
    seconds = int(now // 1)
    millis = int((now - seconds) * 1000)
    hms = time.strftime("%H:%M:%S", time.localtime(seconds))
    return f"{hms}.{millis:03d}"