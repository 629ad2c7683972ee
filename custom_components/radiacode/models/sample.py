"""Dose rate sample model for Radiacode integration."""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Sample:
    """Single dose rate reading from the detector bridge.

    A missing field means unknown, not zero. ``is_valid`` is False when the
    fetch itself failed; ``error`` then carries the reason.
    """

    dose_rate: Optional[float] = None  # µSv/h
    timestamp: Optional[int] = None  # epoch seconds
    is_valid: bool = True
    error: Optional[str] = None

    @classmethod
    def failed(cls, error: str) -> "Sample":
        """Return an empty sample marking a failed fetch."""
        return cls(is_valid=False, error=error)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Sample":
        """Build a sample from the ``data`` object of a /doserate response."""
        raw_rate = payload.get("doserate")
        if raw_rate is None:
            # Older bridge revisions used camelCase
            raw_rate = payload.get("doseRate")
        return cls(
            dose_rate=_dose_rate_or_none(raw_rate),
            timestamp=_int_or_none(payload.get("timestamp")),
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "dose_rate": self.dose_rate,
            "timestamp": self.timestamp,
            "is_valid": self.is_valid,
            "error": self.error,
        }


def _dose_rate_or_none(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result) or result < 0:
        return None
    return result


def _int_or_none(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None
