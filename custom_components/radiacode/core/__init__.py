"""Core business logic for Radiacode integration.

This package contains the core functionality:
- API client for HTTP communication with the detector bridge
- Sensor adapter owning the throttled cache
- State mapper deriving sensor values
- Custom exceptions
"""

from .api_client import RadiacodeHttpApiClient
from .exceptions import (
    ApiException,
    ParseException,
    RadiacodeException,
    UninitializedException,
)
from .sensor_adapter import RadiacodeSensorAdapter

__all__ = [
    "RadiacodeHttpApiClient",
    "RadiacodeSensorAdapter",
    "RadiacodeException",
    "UninitializedException",
    "ApiException",
    "ParseException",
]
