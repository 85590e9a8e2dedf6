"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the engine to its collaborators:
- Upstream content and flight data (static, JSON fixtures, payload parsing)
- Caching systems (in-memory LRU, null)
"""
