"""Ports layer - Abstract interfaces (Protocols) for the engine.

Ports define the contracts between the engine core and external
adapters. They enable dependency injection and make the engine testable.

This module follows the Hexagonal Architecture pattern:
- Input ports: How the engine is driven (services)
- Output ports: How the engine reaches collaborators (adapters)
"""

from .cache import CachePort
from .upstream import ContentSourcePort, FlightDataPort

__all__ = [
    # Upstream
    "ContentSourcePort",
    "FlightDataPort",
    # Cache
    "CachePort",
]
