"""Entity implementations for Radiacode integration.

This package contains all entity types:
- Sensors
- Binary sensors
- Base entity classes
"""

from .base_entity import RadiacodeBaseEntity

__all__ = [
    "RadiacodeBaseEntity",
]
