"""HTTP API client for Radiacode integration."""

import asyncio
from typing import Any, Dict, Optional
import logging

import aiohttp
from aiohttp.client import ClientTimeout

from ..const import (
    DEFAULT_HEADERS,
    REQUEST_TIMEOUT,
    URL_DEVICE_INFO,
    URL_DOSE_RATE,
)
from ..models import DeviceInfo, Sample
from .exceptions import ApiException, ParseException, UninitializedException

_LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = ClientTimeout(total=REQUEST_TIMEOUT)


def normalize_base_url(base_url: Optional[str]) -> Optional[str]:
    """Strip whitespace and trailing slashes; empty strings become None."""
    if base_url is None:
        return None
    cleaned = str(base_url).strip().rstrip("/")
    return cleaned or None


class RadiacodeHttpApiClient:
    """HTTP API client for the Radiacode detector bridge."""

    __slots__ = ("_session", "_base_url")

    def __init__(self, session: aiohttp.ClientSession, base_url: Optional[str]) -> None:
        """Initialize the API client.

        Args:
            session: aiohttp client session for HTTP requests
            base_url: Bridge address such as ``http://host:port``. May be None;
                every fetch then raises UninitializedException.
        """
        self._session = session
        self._base_url = normalize_base_url(base_url)
        if self._base_url is None:
            _LOGGER.warning("Radiacode API client created without a server address")

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    @property
    def is_configured(self) -> bool:
        return self._base_url is not None

    def _require_base_url(self) -> str:
        if self._base_url is None:
            raise UninitializedException(
                "Radiacode API client not initialized due to invalid configuration"
            )
        return self._base_url

    async def _get_data(self, endpoint: str) -> Dict[str, Any]:
        """GET an endpoint and return its ``data`` object.

        Args:
            endpoint: Path relative to the base URL

        Returns:
            The ``data`` object of the response body

        Raises:
            UninitializedException: If no base URL is configured
            ParseException: If the body is not JSON or lacks a ``data`` object
            ApiException: On network errors, timeouts or non-2xx status
        """
        url = f"{self._require_base_url()}{endpoint}"

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("HTTP GET %s", url)

        try:
            async with self._session.request(
                "GET", url, headers=DEFAULT_HEADERS, timeout=DEFAULT_TIMEOUT
            ) as response:
                if _LOGGER.isEnabledFor(logging.DEBUG):
                    _LOGGER.debug("HTTP %s response: %s", url, response.status)

                if not 200 <= response.status < 300:
                    raise ApiException(f"HTTP error {response.status} from {url}")

                try:
                    resp_json = await response.json(content_type=None)
                except (aiohttp.ContentTypeError, ValueError) as json_err:
                    raise ParseException(f"Invalid JSON from {url}") from json_err

        except ApiException:
            raise
        except asyncio.TimeoutError as exc:
            raise ApiException(f"Timeout after {REQUEST_TIMEOUT}s requesting {url}") from exc
        except aiohttp.ClientError as exc:
            raise ApiException(f"Client error {url}: {type(exc).__name__}: {exc}") from exc

        if not isinstance(resp_json, dict):
            raise ParseException(f"Unexpected body from {url}: {str(resp_json)[:300]}")
        data = resp_json.get("data")
        if not isinstance(data, dict):
            raise ParseException(f"Missing 'data' object in response from {url}")
        return data

    async def fetch_sample(self) -> Sample:
        """Fetch the latest dose rate sample.

        Transport and parse failures are logged and returned as an invalid,
        empty Sample. Only UninitializedException propagates.
        """
        try:
            data = await self._get_data(URL_DOSE_RATE)
        except ApiException as err:
            _LOGGER.error(f"Failed to fetch dose rate: {err}")
            return Sample.failed(str(err))
        return Sample.from_payload(data)

    async def fetch_device_info(self) -> DeviceInfo:
        """Fetch hardware info (serial, firmware, battery). Same failure policy as fetch_sample."""
        try:
            data = await self._get_data(URL_DEVICE_INFO)
        except ApiException as err:
            _LOGGER.error(f"Failed to fetch device info: {err}")
            return DeviceInfo.failed(str(err))
        return DeviceInfo.from_payload(data)

    async def probe(self) -> DeviceInfo:
        """Fetch device info and raise on failure. Used when validating a new address.

        Raises:
            UninitializedException: If no base URL is configured
            ApiException: If the bridge cannot be reached or answers garbage
        """
        data = await self._get_data(URL_DEVICE_INFO)
        return DeviceInfo.from_payload(data)
