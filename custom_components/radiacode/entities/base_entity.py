"""Base entity class for Radiacode integration."""

from typing import Any, Awaitable, Callable
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_NAME
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.entity import Entity, EntityDescription

from ..const import DOMAIN, DEFAULT_NAME, MANUFACTURER, MODEL

_LOGGER = logging.getLogger(__name__)


def build_device_info(entry: ConfigEntry) -> DeviceInfo:
    """Device registry entry shared by every Radiacode entity of a config entry."""
    return DeviceInfo(
        identifiers={(DOMAIN, entry.unique_id or entry.entry_id)},
        name=entry.data.get(CONF_NAME) or DEFAULT_NAME,
        manufacturer=MANUFACTURER,
        model=MODEL,
    )


class RadiacodeBaseEntity(Entity):
    """Polling entity that reads its state through an adapter getter."""

    _attr_has_entity_name = True
    _attr_should_poll = True

    def __init__(
        self,
        entry: ConfigEntry,
        device_info: DeviceInfo,
        description: EntityDescription,
        getter: Callable[[], Awaitable[Any]],
    ) -> None:
        """Initialize base entity.

        Args:
            entry: Config entry the entity belongs to
            device_info: Device information
            description: Entity description; its key names the getter
            getter: Adapter capability returning the current value
        """
        self.entity_description = description
        self._getter = getter
        self._attr_unique_id = f"{entry.unique_id or entry.entry_id}_{description.key}"
        self._attr_device_info = device_info

    async def async_update(self) -> None:
        """Poll the adapter and store the derived value."""
        value = await self._getter()
        self._set_value(value)
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Update %s: %s", self.entity_description.key, value)

    def _set_value(self, value: Any) -> None:
        raise NotImplementedError
