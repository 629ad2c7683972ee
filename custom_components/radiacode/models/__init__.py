"""Data models for Radiacode integration.

This package contains data models and validation.
"""

from .cache import SensorCache
from .device_info import DeviceInfo
from .sample import Sample

__all__ = [
    "DeviceInfo",
    "Sample",
    "SensorCache",
]
