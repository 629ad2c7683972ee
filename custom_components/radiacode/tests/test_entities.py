"""Tests for Radiacode sensor and binary sensor entities."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from custom_components.radiacode.const import (
    DOMAIN,
    DEFAULT_SCAN_INTERVAL,
    KEY_AIR_QUALITY,
    KEY_BATTERY_LEVEL,
    KEY_ELEVATED_DOSE,
    KEY_LOW_BATTERY,
)
from custom_components.radiacode.core.sensor_adapter import RadiacodeSensorAdapter
from custom_components.radiacode.entities import binary_sensor, sensor
from custom_components.radiacode.entities.base_entity import build_device_info
from custom_components.radiacode.models import Sample


@pytest.fixture
def adapter(mock_api_client, clock) -> RadiacodeSensorAdapter:
    return RadiacodeSensorAdapter(mock_api_client, clock=clock)


def test_build_device_info(mock_config_entry):
    """Test every entity shares one device registry entry."""
    info = build_device_info(mock_config_entry)

    assert info["identifiers"] == {(DOMAIN, "RC-101-001234")}
    assert info["name"] == "Living Room Radiacode"
    assert info["manufacturer"] == "Radiascan"
    assert info["model"] == "Radiacode 101"


@pytest.mark.asyncio
async def test_sensor_platform_adds_all_entities(mock_hass, mock_config_entry, adapter):
    """Test the sensor platform registers one entity per description."""
    mock_hass.data[DOMAIN][mock_config_entry.entry_id] = {"adapter": adapter}
    async_add_entities = MagicMock()

    await sensor.async_setup_entry(mock_hass, mock_config_entry, async_add_entities)

    entities = async_add_entities.call_args[0][0]
    assert [e.entity_description.key for e in entities] == [
        d.key for d in sensor.SENSOR_DESCRIPTIONS
    ]
    assert async_add_entities.call_args.kwargs["update_before_add"] is True
    assert entities[0].unique_id == f"RC-101-001234_{KEY_AIR_QUALITY}"


@pytest.mark.asyncio
async def test_binary_sensor_platform_adds_all_entities(mock_hass, mock_config_entry, adapter):
    """Test the binary sensor platform registers one entity per description."""
    mock_hass.data[DOMAIN][mock_config_entry.entry_id] = {"adapter": adapter}
    async_add_entities = MagicMock()

    await binary_sensor.async_setup_entry(mock_hass, mock_config_entry, async_add_entities)

    entities = async_add_entities.call_args[0][0]
    assert len(entities) == len(binary_sensor.BINARY_SENSOR_DESCRIPTIONS)


@pytest.mark.asyncio
async def test_platform_without_entry_data(mock_hass, mock_config_entry):
    """Test platforms skip setup when the entry was not initialised."""
    async_add_entities = MagicMock()

    await sensor.async_setup_entry(mock_hass, mock_config_entry, async_add_entities)
    await binary_sensor.async_setup_entry(mock_hass, mock_config_entry, async_add_entities)

    async_add_entities.assert_not_called()


@pytest.mark.asyncio
async def test_sensor_update_reads_adapter(mock_config_entry, adapter, mock_api_client):
    """Test sensor entities store the derived value on update."""
    caps = adapter.capabilities()
    device_info = build_device_info(mock_config_entry)
    descriptions = {d.key: d for d in sensor.SENSOR_DESCRIPTIONS}

    air_quality = sensor.RadiacodeSensor(
        mock_config_entry, device_info, descriptions[KEY_AIR_QUALITY], caps[KEY_AIR_QUALITY]
    )
    battery = sensor.RadiacodeSensor(
        mock_config_entry, device_info, descriptions[KEY_BATTERY_LEVEL], caps[KEY_BATTERY_LEVEL]
    )

    await air_quality.async_update()
    await battery.async_update()

    assert air_quality.native_value == "good"
    assert battery.native_value == 87


@pytest.mark.asyncio
async def test_binary_sensor_update_reads_adapter(mock_config_entry, adapter, mock_api_client):
    """Test binary sensor entities store the derived flag on update."""
    mock_api_client.fetch_sample.return_value = Sample(dose_rate=0.31, timestamp=0)
    caps = adapter.capabilities()
    device_info = build_device_info(mock_config_entry)
    descriptions = {d.key: d for d in binary_sensor.BINARY_SENSOR_DESCRIPTIONS}

    elevated = binary_sensor.RadiacodeBinarySensor(
        mock_config_entry, device_info, descriptions[KEY_ELEVATED_DOSE], caps[KEY_ELEVATED_DOSE]
    )
    low_battery = binary_sensor.RadiacodeBinarySensor(
        mock_config_entry, device_info, descriptions[KEY_LOW_BATTERY], caps[KEY_LOW_BATTERY]
    )

    await elevated.async_update()
    await low_battery.async_update()

    assert elevated.is_on is True
    assert low_battery.is_on is False


def test_platforms_poll_on_scan_interval():
    """Test both platforms export the integration's poll period."""
    from custom_components.radiacode import binary_sensor as binary_sensor_platform
    from custom_components.radiacode import sensor as sensor_platform

    expected = timedelta(seconds=DEFAULT_SCAN_INTERVAL)
    assert sensor.SCAN_INTERVAL == expected
    assert binary_sensor.SCAN_INTERVAL == expected
    assert sensor_platform.SCAN_INTERVAL == expected
    assert binary_sensor_platform.SCAN_INTERVAL == expected
