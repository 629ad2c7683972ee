# /config/custom_components/radiacode/const.py

import logging
from typing import Final

DOMAIN: Final = "radiacode"
_LOGGER = logging.getLogger(__package__)

DEFAULT_NAME: Final = "Radiacode"
MANUFACTURER: Final = "Radiascan"
MODEL: Final = "Radiacode 101"

# --- HTTP API Constants ---
URL_DOSE_RATE: Final = "/doserate"
URL_DEVICE_INFO: Final = "/info"
REQUEST_TIMEOUT: Final = 10  # seconds

DEFAULT_HEADERS: Final = {
    "Accept": "application/json, text/plain, */*",
}

# --- Configuration Keys ---
CONF_RADIACODE_SERVER: Final = "radiacode_server"

# --- Polling and Throttling ---
SAMPLE_REFRESH_INTERVAL: Final = 5.0          # seconds between dose rate fetches
DEVICE_INFO_REFRESH_INTERVAL: Final = 60.0    # seconds between /info fetches
DEFAULT_SCAN_INTERVAL: Final = 10             # entity poll period, seconds

# --- Thresholds (µSv/h) ---
DOSE_RATE_POOR: Final = 0.3
DOSE_RATE_INFERIOR: Final = 0.2
DOSE_RATE_FAIR: Final = 0.15
DOSE_RATE_GOOD: Final = 0.1
ELEVATED_DOSE_THRESHOLD: Final = 0.2

SAMPLE_MAX_AGE: Final = 2 * 60 * 60  # seconds before a sample counts as stale
LOW_BATTERY_THRESHOLD: Final = 20    # percent

DOSE_RATE_UNIT: Final = "µSv/h"
DOSE_RATE_DISPLAY_SUFFIX: Final = " µSv/hr"
UNKNOWN: Final = "unknown"

# --- Air quality tiers ---
AIR_QUALITY_EXCELLENT: Final = "excellent"
AIR_QUALITY_GOOD: Final = "good"
AIR_QUALITY_FAIR: Final = "fair"
AIR_QUALITY_INFERIOR: Final = "inferior"
AIR_QUALITY_POOR: Final = "poor"
AIR_QUALITY_UNKNOWN: Final = UNKNOWN

AIR_QUALITY_OPTIONS: Final = [
    AIR_QUALITY_EXCELLENT,
    AIR_QUALITY_GOOD,
    AIR_QUALITY_FAIR,
    AIR_QUALITY_INFERIOR,
    AIR_QUALITY_POOR,
    AIR_QUALITY_UNKNOWN,
]

# --- Entity Keys ---
KEY_AIR_QUALITY: Final = "air_quality"
KEY_DOSE_RATE: Final = "dose_rate"
KEY_DOSE_RATE_DISPLAY: Final = "dose_rate_display"
KEY_ELEVATED_DOSE: Final = "elevated_dose"
KEY_STATUS_ACTIVE: Final = "status_active"
KEY_SERIAL_NUMBER: Final = "serial_number"
KEY_FIRMWARE_VERSION: Final = "firmware_version"
KEY_BATTERY_LEVEL: Final = "battery_level"
KEY_LOW_BATTERY: Final = "low_battery"
