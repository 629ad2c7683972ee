"""Device information models for Radiacode integration."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DeviceInfo:
    """Device information data class."""

    serial_number: Optional[str] = None
    firmware_version: Optional[str] = None
    battery_percent: Optional[int] = None
    is_valid: bool = True
    error: Optional[str] = None

    @classmethod
    def failed(cls, error: str) -> "DeviceInfo":
        return cls(is_valid=False, error=error)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "DeviceInfo":
        """Build device info from the ``data`` object of an /info response."""
        return cls(
            serial_number=_str_or_none(payload.get("serial")),
            firmware_version=_str_or_none(payload.get("fw_version")),
            battery_percent=_battery_or_none(payload.get("battery")),
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "serial_number": self.serial_number,
            "firmware_version": self.firmware_version,
            "battery_percent": self.battery_percent,
            "is_valid": self.is_valid,
            "error": self.error,
        }


def _str_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _battery_or_none(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        percent = int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        return None
    if not 0 <= percent <= 100:
        return None
    return percent
