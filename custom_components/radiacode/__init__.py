"""Radiacode radiation detector integration for Home Assistant."""

from __future__ import annotations

import logging
from typing import Optional

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import HomeAssistant
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .const import DOMAIN, _LOGGER, CONF_RADIACODE_SERVER
from .core.api_client import RadiacodeHttpApiClient
from .core.sensor_adapter import RadiacodeSensorAdapter

PLATFORMS: list[Platform] = [Platform.SENSOR, Platform.BINARY_SENSOR]


async def async_setup(hass: HomeAssistant, config: dict) -> bool:
    """Set up the Radiacode integration."""
    # Config flow is handled automatically by Home Assistant
    # when config_flow: true is set in manifest.json
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Radiacode from a config entry."""
    _LOGGER.info(f"Setting up Radiacode: {entry.title} ({entry.entry_id})")
    hass.data.setdefault(DOMAIN, {})

    server: Optional[str] = entry.data.get(CONF_RADIACODE_SERVER)
    if not server:
        # Entities still load and report defaults; every fetch raises UninitializedException
        _LOGGER.error(f"Missing required config value: {CONF_RADIACODE_SERVER}")

    session = async_get_clientsession(hass)
    api_client = RadiacodeHttpApiClient(session, server)
    adapter = RadiacodeSensorAdapter(api_client)

    hass.data[DOMAIN][entry.entry_id] = {
        "api_client": api_client,
        "adapter": adapter,
    }

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    _LOGGER.info(f"Setup complete for {entry.title} ({api_client.base_url})")
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    _LOGGER.info(f"Unloading Radiacode: {entry.title}")

    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    if unload_ok:
        entry_data = hass.data.get(DOMAIN, {}).pop(entry.entry_id, None)
        if entry_data is None:
            _LOGGER.warning(f"No entry data {entry.entry_id} to clean.")
        elif _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Removed entry data %s.", entry.entry_id)

    _LOGGER.info(f"Unload {entry.title}: {'OK' if unload_ok else 'Failed'}.")
    return unload_ok
