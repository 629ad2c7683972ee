"""Pytest configuration and fixtures for Radiacode integration tests."""

from __future__ import annotations

from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_NAME

from custom_components.radiacode.const import DOMAIN, CONF_RADIACODE_SERVER
from custom_components.radiacode.core.api_client import RadiacodeHttpApiClient
from custom_components.radiacode.models import DeviceInfo, Sample

NOW = 1_700_000_000.0


class FakeClock:
    """Manually advanced wall clock."""

    def __init__(self, now: float = NOW) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def mock_session(
    status: int = 200,
    json_data: Any = None,
    enter_exc: Optional[BaseException] = None,
    json_exc: Optional[BaseException] = None,
) -> MagicMock:
    """aiohttp session whose ``request`` yields one canned response."""
    response = MagicMock()
    response.status = status
    if json_exc is not None:
        response.json = AsyncMock(side_effect=json_exc)
    else:
        response.json = AsyncMock(return_value=json_data)

    request_ctx = MagicMock()
    if enter_exc is not None:
        request_ctx.__aenter__ = AsyncMock(side_effect=enter_exc)
    else:
        request_ctx.__aenter__ = AsyncMock(return_value=response)
    request_ctx.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.request = MagicMock(return_value=request_ctx)
    return session


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def mock_hass():
    """Mock Home Assistant instance."""
    hass = MagicMock()
    hass.data = {DOMAIN: {}}
    hass.config_entries.async_forward_entry_setups = AsyncMock(return_value=None)
    hass.config_entries.async_unload_platforms = AsyncMock(return_value=True)
    return hass


@pytest.fixture
def mock_config_entry() -> ConfigEntry:
    """Mock config entry."""
    entry = MagicMock(spec=ConfigEntry)
    entry.entry_id = "test_entry_id"
    entry.unique_id = "RC-101-001234"
    entry.title = "Living Room Radiacode"
    entry.data = {
        CONF_NAME: "Living Room Radiacode",
        CONF_RADIACODE_SERVER: "http://radiacode.local:8080",
    }
    entry.options = {}
    return entry


@pytest.fixture
def mock_api_client():
    """Mock telemetry client returning a quiet background reading."""
    client = MagicMock(spec=RadiacodeHttpApiClient)
    client.is_configured = True
    client.base_url = "http://radiacode.local:8080"
    client.fetch_sample = AsyncMock(
        return_value=Sample(dose_rate=0.12, timestamp=int(NOW) - 30)
    )
    client.fetch_device_info = AsyncMock(
        return_value=DeviceInfo(
            serial_number="RC-101-001234", firmware_version="4.12", battery_percent=87
        )
    )
    return client
