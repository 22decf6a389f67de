"""Error kinds raised by the VLAN domain, store and service layers."""
from __future__ import annotations

from typing import Iterable


class VLANError(Exception):
    """Base class for VLAN record errors."""


class ValidationError(VLANError):
    """Raised when a record violates one or more invariants.

    All violations are carried together so a client sees every problem at once.
    """

    def __init__(self, messages: Iterable[str]):
        self.messages = list(messages)
        super().__init__(", ".join(self.messages))


class NotFoundError(VLANError):
    """Raised when an operation targets an id the store does not hold."""

    def __init__(self, vlan_id: object):
        super().__init__(f"VLAN {vlan_id} not found")
        self.vlan_id = vlan_id


class PersistenceError(VLANError):
    """Raised when the backing JSON file cannot be read, decoded or written."""


class MalformedInputError(VLANError):
    """Raised when client input cannot be decoded into a record or id."""
