"""Throttled cache between Home Assistant entities and the Radiacode bridge."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar

from ..const import (
    DEVICE_INFO_REFRESH_INTERVAL,
    KEY_AIR_QUALITY,
    KEY_BATTERY_LEVEL,
    KEY_DOSE_RATE,
    KEY_DOSE_RATE_DISPLAY,
    KEY_ELEVATED_DOSE,
    KEY_FIRMWARE_VERSION,
    KEY_LOW_BATTERY,
    KEY_SERIAL_NUMBER,
    KEY_STATUS_ACTIVE,
    SAMPLE_REFRESH_INTERVAL,
)
from ..models import DeviceInfo, Sample, SensorCache
from . import state_mapper
from .api_client import RadiacodeHttpApiClient
from .exceptions import UninitializedException

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")

Getter = Callable[[], Awaitable[Any]]


class RadiacodeSensorAdapter:
    """Owns the cached bridge state and derives every exposed sensor value.

    Samples are fetched at most once per ``refresh_interval`` and device info at
    most once per ``device_info_interval``. Each kind has its own lock, held for
    the whole refresh-then-read sequence, so concurrent getters in one window
    share a single HTTP call and never see a half-updated cache.
    """

    __slots__ = (
        "_api_client",
        "_cache",
        "_sample_lock",
        "_device_info_lock",
        "_refresh_interval",
        "_device_info_interval",
        "_clock",
    )

    def __init__(
        self,
        api_client: RadiacodeHttpApiClient,
        refresh_interval: float = SAMPLE_REFRESH_INTERVAL,
        device_info_interval: float = DEVICE_INFO_REFRESH_INTERVAL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the adapter.

        Args:
            api_client: Telemetry client for the bridge
            refresh_interval: Minimum seconds between dose rate fetches
            device_info_interval: Minimum seconds between device info fetches
            clock: Wall clock returning epoch seconds
        """
        self._api_client = api_client
        self._cache = SensorCache()
        self._sample_lock = asyncio.Lock()
        self._device_info_lock = asyncio.Lock()
        self._refresh_interval = refresh_interval
        self._device_info_interval = device_info_interval
        self._clock = clock

    @property
    def cache(self) -> SensorCache:
        return self._cache

    # ---------------------------
    # Refresh
    # ---------------------------

    async def async_refresh_sample_if_stale(self) -> None:
        async with self._sample_lock:
            await self._refresh_sample_locked()

    async def async_refresh_device_info_if_stale(self) -> None:
        async with self._device_info_lock:
            await self._refresh_device_info_locked()

    async def _refresh_sample_locked(self) -> None:
        now = self._clock()
        if now - self._cache.sample_fetched_at <= self._refresh_interval:
            return

        _LOGGER.info("Refreshing latest samples...")
        try:
            sample = await self._api_client.fetch_sample()
        except UninitializedException as err:
            _LOGGER.error(str(err))
        else:
            if sample.is_valid:
                self._cache.sample = sample
                if _LOGGER.isEnabledFor(logging.DEBUG):
                    _LOGGER.debug("Latest sample: %s", sample)
            else:
                _LOGGER.warning(f"Sample fetch failed, keeping last known values: {sample.error}")
        finally:
            # Advances even on failure so a dead bridge is polled once per interval
            self._cache.sample_fetched_at = now

    async def _refresh_device_info_locked(self) -> None:
        now = self._clock()
        if now - self._cache.device_info_fetched_at <= self._device_info_interval:
            return

        _LOGGER.info("Refreshing device info...")
        try:
            info = await self._api_client.fetch_device_info()
        except UninitializedException as err:
            _LOGGER.error(str(err))
        else:
            if info.is_valid:
                self._cache.device_info = info
                _LOGGER.info(
                    f"Device info: serial={info.serial_number}, battery={info.battery_percent}"
                )
            else:
                _LOGGER.warning(f"Device info fetch failed, keeping last known values: {info.error}")
        finally:
            self._cache.device_info_fetched_at = now

    async def _read_sample(self, mapper: Callable[[Sample], _T]) -> _T:
        async with self._sample_lock:
            await self._refresh_sample_locked()
            return mapper(self._cache.sample)

    async def _read_device_info(self, mapper: Callable[[DeviceInfo], _T]) -> _T:
        async with self._device_info_lock:
            await self._refresh_device_info_locked()
            return mapper(self._cache.device_info)

    # ---------------------------
    # Getters
    # ---------------------------

    async def async_get_air_quality(self) -> str:
        sample = await self._read_sample(lambda s: s)
        if sample.dose_rate is None:
            _LOGGER.warning("Dose rate undefined, air quality unknown")
        return state_mapper.air_quality(sample)

    async def async_get_elevated_dose(self) -> bool:
        return await self._read_sample(state_mapper.elevated_dose)

    async def async_get_dose_rate(self) -> Optional[float]:
        return await self._read_sample(state_mapper.dose_rate_value)

    async def async_get_dose_rate_display(self) -> str:
        return await self._read_sample(state_mapper.dose_rate_display)

    async def async_get_status_active(self) -> bool:
        sample = await self._read_sample(lambda s: s)
        if sample.timestamp is None:
            _LOGGER.warning("Sample timestamp undefined, reporting inactive")
        return state_mapper.status_active(sample, self._clock())

    async def async_get_serial_number(self) -> str:
        return await self._read_device_info(state_mapper.serial_number)

    async def async_get_firmware_version(self) -> str:
        return state_mapper.firmware_version(self._cache.device_info)

    async def async_get_battery_level(self) -> int:
        info = await self._read_device_info(lambda i: i)
        if info.battery_percent is None:
            _LOGGER.warning("Battery level undefined, reporting 0")
        return state_mapper.battery_level(info)

    async def async_get_low_battery(self) -> bool:
        return await self._read_device_info(state_mapper.low_battery)

    def capabilities(self) -> Dict[str, Getter]:
        """Return the getter handle for every entity key."""
        return {
            KEY_AIR_QUALITY: self.async_get_air_quality,
            KEY_ELEVATED_DOSE: self.async_get_elevated_dose,
            KEY_DOSE_RATE: self.async_get_dose_rate,
            KEY_DOSE_RATE_DISPLAY: self.async_get_dose_rate_display,
            KEY_STATUS_ACTIVE: self.async_get_status_active,
            KEY_SERIAL_NUMBER: self.async_get_serial_number,
            KEY_FIRMWARE_VERSION: self.async_get_firmware_version,
            KEY_BATTERY_LEVEL: self.async_get_battery_level,
            KEY_LOW_BATTERY: self.async_get_low_battery,
        }

    def snapshot(self) -> Dict[str, Any]:
        """Plain-dict view of the cache for diagnostics."""
        return {
            "configured": self._api_client.is_configured,
            "refresh_interval": self._refresh_interval,
            "device_info_interval": self._device_info_interval,
            **self._cache.as_dict(),
        }
