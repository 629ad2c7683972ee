"""Cached upstream state owned by the sensor adapter."""

from dataclasses import dataclass, field
from typing import Any, Dict

from .device_info import DeviceInfo
from .sample import Sample


@dataclass
class SensorCache:
    """Most recent sample and device info with their fetch times.

    Fetch times start at 0 so the first poll always refreshes. Fields are
    replaced only with valid results; a failed fetch keeps the previous value.
    """

    sample: Sample = field(default_factory=Sample)
    device_info: DeviceInfo = field(default_factory=DeviceInfo)
    sample_fetched_at: float = 0.0
    device_info_fetched_at: float = 0.0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "sample": self.sample.as_dict(),
            "device_info": self.device_info.as_dict(),
            "sample_fetched_at": self.sample_fetched_at,
            "device_info_fetched_at": self.device_info_fetched_at,
        }
