"""Diagnostics support for Radiacode integration."""

from __future__ import annotations

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .const import DOMAIN, CONF_RADIACODE_SERVER
from .core.sensor_adapter import RadiacodeSensorAdapter


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant, entry: ConfigEntry
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    entry_data = hass.data.get(DOMAIN, {}).get(entry.entry_id, {})

    diagnostics_data: dict[str, Any] = {
        "entry": {
            "entry_id": entry.entry_id,
            "title": entry.title,
            "data": dict(entry.data),
            "options": dict(entry.options),
        },
        "server": entry.data.get(CONF_RADIACODE_SERVER),
    }

    adapter = entry_data.get("adapter")
    if isinstance(adapter, RadiacodeSensorAdapter):
        diagnostics_data["adapter"] = adapter.snapshot()
    else:
        diagnostics_data["adapter"] = {"status": "not_initialized"}

    return diagnostics_data
