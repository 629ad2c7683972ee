"""Sensor platform for Radiacode integration."""

from .entities.sensor import PARALLEL_UPDATES, SCAN_INTERVAL, async_setup_entry

__all__ = ["PARALLEL_UPDATES", "SCAN_INTERVAL", "async_setup_entry"]
