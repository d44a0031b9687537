"""Setting build properties for the device variant named by the bootloader."""

from __future__ import annotations

import logging

_log = logging.getLogger("mondrianhal.init")

ANDROID_TARGET = "msm8974"

_UE_PROPERTIES = {
    "ro.build.fingerprint": "samsung/mondrianwifiue/mondrianwifiue:4.4.2/KOT49H/T320UEU1ANAI:user/release-keys",
    "ro.build.description": "mondrianwifiue-user 4.4.2 KOT49H T320UEU1ANAI release-keys",
    "ro.product.model": "SM-T320",
    "ro.product.device": "mondrianwifiue",
}

_XX_PROPERTIES = {
    "ro.build.fingerprint": "samsung/mondrianwifixx/mondrianwifi:4.4.2/KOT49H/T320XXU1ANAI:user/release-keys",
    "ro.build.description": "mondrianwifixx-user 4.4.2 KOT49H T320XXU1ANAI release-keys",
    "ro.product.model": "SM-T320",
    "ro.product.device": "mondrianwifi",
}


def init_msm_properties(properties, target=ANDROID_TARGET):
    """Set the build properties in ``properties`` for the variant the bootloader names.

    Nothing is changed unless ``ro.board.platform`` equals ``target``.
    Returns the product device name that was set, or None.
    """
    platform = properties.get("ro.board.platform", "")
    if not platform or platform != target:
        return None

    bootloader = properties.get("ro.bootloader", "")
    variant = _UE_PROPERTIES if "T320UE" in bootloader else _XX_PROPERTIES
    properties.update(variant)

    device = properties.get("ro.product.device", "")
    _log.error("Found bootloader id %s setting build properties for %s device", bootloader, device)
    return device