"""Pure mapping from cached Radiacode readings to sensor values.

Every function here is side-effect free: it takes the cached model (and the
current time where relevant) and returns the value a sensor should report.
Absent inputs map to the documented default instead of raising.

Air quality tiers (µSv/h):

    >= 0.3          poor
    [0.2, 0.3)      inferior
    [0.15, 0.2)     fair
    [0.1, 0.15)     good
    < 0.1           excellent
    absent          unknown
"""

import math
from typing import Optional

from ..const import (
    AIR_QUALITY_EXCELLENT,
    AIR_QUALITY_FAIR,
    AIR_QUALITY_GOOD,
    AIR_QUALITY_INFERIOR,
    AIR_QUALITY_POOR,
    AIR_QUALITY_UNKNOWN,
    DOSE_RATE_DISPLAY_SUFFIX,
    DOSE_RATE_FAIR,
    DOSE_RATE_GOOD,
    DOSE_RATE_INFERIOR,
    DOSE_RATE_POOR,
    ELEVATED_DOSE_THRESHOLD,
    LOW_BATTERY_THRESHOLD,
    SAMPLE_MAX_AGE,
    UNKNOWN,
)
from ..models import DeviceInfo, Sample


def air_quality(sample: Sample) -> str:
    dose_rate = sample.dose_rate
    if dose_rate is None:
        return AIR_QUALITY_UNKNOWN
    if dose_rate >= DOSE_RATE_POOR:
        return AIR_QUALITY_POOR
    if dose_rate >= DOSE_RATE_INFERIOR:
        return AIR_QUALITY_INFERIOR
    if dose_rate >= DOSE_RATE_FAIR:
        return AIR_QUALITY_FAIR
    if dose_rate >= DOSE_RATE_GOOD:
        return AIR_QUALITY_GOOD
    return AIR_QUALITY_EXCELLENT


def elevated_dose(sample: Sample) -> bool:
    return sample.dose_rate is not None and sample.dose_rate >= ELEVATED_DOSE_THRESHOLD


def dose_rate_value(sample: Sample) -> Optional[float]:
    return sample.dose_rate


def format_significant(value: float, digits: int = 3) -> str:
    """Render ``value`` with ``digits`` significant digits, keeping trailing zeros.

    0.25 -> "0.250", 1.234 -> "1.23", 12.34 -> "12.3", 0.0001234 -> "0.000123".
    Very large or very small magnitudes fall back to exponent notation.
    """
    if value == 0:
        return "0." + "0" * (digits - 1)
    exponent = int(f"{value:.{digits - 1}e}".split("e")[1])
    if exponent < -6 or exponent >= digits:
        return f"{value:.{digits - 1}e}"
    decimals = max(digits - 1 - exponent, 0)
    return f"{value:.{decimals}f}"


def dose_rate_display(sample: Sample) -> str:
    if sample.dose_rate is None or not math.isfinite(sample.dose_rate):
        return UNKNOWN
    return format_significant(sample.dose_rate) + DOSE_RATE_DISPLAY_SUFFIX


def status_active(sample: Sample, now: float) -> bool:
    """True while the sample's own timestamp is less than two hours old."""
    if sample.timestamp is None:
        return False
    return (now - sample.timestamp) < SAMPLE_MAX_AGE


def serial_number(info: DeviceInfo) -> str:
    return info.serial_number or UNKNOWN


def firmware_version(info: DeviceInfo) -> str:
    # The bridge's fw_version field is not trusted; always report unknown.
    return UNKNOWN


def battery_level(info: DeviceInfo) -> int:
    if info.battery_percent is None:
        return 0
    return info.battery_percent


def low_battery(info: DeviceInfo) -> bool:
    # Unknown battery is reported as not low.
    return info.battery_percent is not None and info.battery_percent < LOW_BATTERY_THRESHOLD
