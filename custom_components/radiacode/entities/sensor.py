"""Sensor entities for Radiacode integration."""

from datetime import timedelta
from typing import Any
import logging

from homeassistant.components.sensor import (
    SensorEntity,
    SensorEntityDescription,
    SensorDeviceClass,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import PERCENTAGE, EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from ..const import (
    DOMAIN,
    DEFAULT_SCAN_INTERVAL,
    AIR_QUALITY_OPTIONS,
    DOSE_RATE_UNIT,
    KEY_AIR_QUALITY,
    KEY_DOSE_RATE,
    KEY_DOSE_RATE_DISPLAY,
    KEY_BATTERY_LEVEL,
    KEY_SERIAL_NUMBER,
    KEY_FIRMWARE_VERSION,
)
from .base_entity import RadiacodeBaseEntity, build_device_info

_LOGGER = logging.getLogger(__name__)

SENSOR_DESCRIPTIONS: tuple[SensorEntityDescription, ...] = (
    SensorEntityDescription(
        key=KEY_AIR_QUALITY,
        name="Radiation Levels",
        device_class=SensorDeviceClass.ENUM,
        options=AIR_QUALITY_OPTIONS,
        icon="mdi:radioactive",
    ),
    SensorEntityDescription(
        key=KEY_DOSE_RATE,
        name="Dose Rate",
        native_unit_of_measurement=DOSE_RATE_UNIT,
        state_class=SensorStateClass.MEASUREMENT,
        icon="mdi:radioactive",
        suggested_display_precision=3,
    ),
    SensorEntityDescription(
        key=KEY_DOSE_RATE_DISPLAY,
        name="Dose Rate Display",
        icon="mdi:radioactive",
    ),
    SensorEntityDescription(
        key=KEY_BATTERY_LEVEL,
        name="Battery",
        native_unit_of_measurement=PERCENTAGE,
        device_class=SensorDeviceClass.BATTERY,
        state_class=SensorStateClass.MEASUREMENT,
        entity_category=EntityCategory.DIAGNOSTIC,
    ),
    SensorEntityDescription(
        key=KEY_SERIAL_NUMBER,
        name="Serial Number",
        icon="mdi:identifier",
        entity_category=EntityCategory.DIAGNOSTIC,
    ),
    SensorEntityDescription(
        key=KEY_FIRMWARE_VERSION,
        name="Firmware Revision",
        icon="mdi:chip",
        entity_category=EntityCategory.DIAGNOSTIC,
    ),
)

# Entities poll the adapter concurrently; the adapter serializes the fetch.
PARALLEL_UPDATES = 0
SCAN_INTERVAL = timedelta(seconds=DEFAULT_SCAN_INTERVAL)


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
) -> None:
    """Set up sensor platform."""
    _LOGGER.debug(f"Setting up sensor platform for {entry.title}")

    try:
        adapter = hass.data[DOMAIN][entry.entry_id]["adapter"]
    except KeyError as exc:
        _LOGGER.error(f"Missing key {exc} for sensors")
        return

    device_info = build_device_info(entry)
    capabilities = adapter.capabilities()

    entities = [
        RadiacodeSensor(entry, device_info, description, capabilities[description.key])
        for description in SENSOR_DESCRIPTIONS
    ]

    if entities:
        async_add_entities(entities, update_before_add=True)
        _LOGGER.info(f"Added {len(entities)} sensors for {entry.title}")


class RadiacodeSensor(RadiacodeBaseEntity, SensorEntity):
    """Sensor entity backed by an adapter getter."""

    entity_description: SensorEntityDescription

    def _set_value(self, value: Any) -> None:
        self._attr_native_value = value
