"""Binary sensor entities for Radiacode integration."""

from datetime import timedelta
import logging
from typing import Any

from homeassistant.components.binary_sensor import (
    BinarySensorEntity,
    BinarySensorEntityDescription,
    BinarySensorDeviceClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from ..const import (
    DOMAIN,
    DEFAULT_SCAN_INTERVAL,
    KEY_ELEVATED_DOSE,
    KEY_STATUS_ACTIVE,
    KEY_LOW_BATTERY,
)
from .base_entity import RadiacodeBaseEntity, build_device_info

_LOGGER = logging.getLogger(__name__)

BINARY_SENSOR_DESCRIPTIONS: tuple[BinarySensorEntityDescription, ...] = (
    BinarySensorEntityDescription(
        key=KEY_ELEVATED_DOSE,
        name="Elevated Dose Rate",
        device_class=BinarySensorDeviceClass.SAFETY,
        icon="mdi:radioactive",
    ),
    BinarySensorEntityDescription(
        key=KEY_STATUS_ACTIVE,
        name="Status Active",
        device_class=BinarySensorDeviceClass.CONNECTIVITY,
        entity_category=EntityCategory.DIAGNOSTIC,
    ),
    BinarySensorEntityDescription(
        key=KEY_LOW_BATTERY,
        name="Low Battery",
        device_class=BinarySensorDeviceClass.BATTERY,
        entity_category=EntityCategory.DIAGNOSTIC,
    ),
)

PARALLEL_UPDATES = 0
SCAN_INTERVAL = timedelta(seconds=DEFAULT_SCAN_INTERVAL)


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
) -> None:
    """Set up binary sensor platform."""
    _LOGGER.debug(f"Setting up binary sensor platform for {entry.title}")

    try:
        adapter = hass.data[DOMAIN][entry.entry_id]["adapter"]
    except KeyError as exc:
        _LOGGER.error(f"Missing key {exc} for binary sensors")
        return

    device_info = build_device_info(entry)
    capabilities = adapter.capabilities()

    entities = [
        RadiacodeBinarySensor(entry, device_info, description, capabilities[description.key])
        for description in BINARY_SENSOR_DESCRIPTIONS
    ]

    if entities:
        async_add_entities(entities, update_before_add=True)
        _LOGGER.info(f"Added {len(entities)} binary sensors for {entry.title}")


class RadiacodeBinarySensor(RadiacodeBaseEntity, BinarySensorEntity):
    """Binary sensor entity backed by an adapter getter."""

    entity_description: BinarySensorEntityDescription

    def _set_value(self, value: Any) -> None:
        if isinstance(value, bool):
            self._attr_is_on = value
        else:
            _LOGGER.warning(
                f"Received non-boolean value for {self.unique_id}: {value}"
            )
