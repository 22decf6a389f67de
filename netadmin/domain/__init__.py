"""Domain model for VLAN records (pure helpers, no I/O)."""

from .errors import (
    MalformedInputError,
    NotFoundError,
    PersistenceError,
    ValidationError,
    VLANError,
)
from .vlans import VID_MAX, VID_MIN, VLAN, parse_vlan_id, validate_vlan

__all__ = [
    "VLAN",
    "VID_MIN",
    "VID_MAX",
    "validate_vlan",
    "parse_vlan_id",
    "VLANError",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
    "MalformedInputError",
]
