"""Configuration flow for Radiacode integration."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.config_entries import ConfigFlowResult
from homeassistant.const import CONF_NAME
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .const import DOMAIN, DEFAULT_NAME, CONF_RADIACODE_SERVER
from .core.api_client import RadiacodeHttpApiClient, normalize_base_url
from .core.exceptions import ApiException

_LOGGER = logging.getLogger(__name__)


class RadiacodeConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Config flow for Radiacode (bridge URL based)."""

    VERSION = 1

    async def async_step_user(self, user_input: Optional[Dict[str, Any]] = None) -> ConfigFlowResult:
        """Handle the initial step."""
        errors: Dict[str, str] = {}
        name = DEFAULT_NAME
        server = ""

        if user_input is not None:
            name = (user_input.get(CONF_NAME) or DEFAULT_NAME).strip() or DEFAULT_NAME
            server = normalize_base_url(user_input.get(CONF_RADIACODE_SERVER)) or ""

            if not server.startswith(("http://", "https://")):
                errors["base"] = "invalid_url"
            else:
                try:
                    api = RadiacodeHttpApiClient(async_get_clientsession(self.hass), server)
                    _LOGGER.info("Probing Radiacode bridge at %s", server)
                    info = await api.probe()
                except ApiException as exc:
                    _LOGGER.error(f"Cannot connect to Radiacode bridge {server}: {exc}")
                    errors["base"] = "cannot_connect"
                except Exception as exc:
                    _LOGGER.exception(f"Unexpected error probing {server}: {exc}")
                    errors["base"] = "unknown"
                else:
                    await self.async_set_unique_id(info.serial_number or server)
                    self._abort_if_unique_id_configured(
                        updates={CONF_RADIACODE_SERVER: server}
                    )
                    _LOGGER.info(f"Creating new entry for {name} ({server})")
                    return self.async_create_entry(
                        title=name,
                        data={CONF_NAME: name, CONF_RADIACODE_SERVER: server},
                    )

        schema = vol.Schema(
            {
                vol.Required(CONF_RADIACODE_SERVER, default=server): str,
                vol.Optional(CONF_NAME, default=name): str,
            }
        )
        return self.async_show_form(step_id="user", data_schema=schema, errors=errors)
