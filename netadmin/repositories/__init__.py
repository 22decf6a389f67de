"""
Persistence adapters.

These modules encapsulate how VLAN records are stored/retrieved (a single
JSON file today). Services depend on VLANStore rather than touching the file.
"""

from .vlan_store import VLANStore

__all__ = ["VLANStore"]
