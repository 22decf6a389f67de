"""VLAN record model and the rules every stored record must satisfy."""
from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, IPvAnyAddress, IPvAnyInterface, field_validator

from netadmin.domain.errors import MalformedInputError

VID_MIN = 1
VID_MAX = 4094


class VLAN(BaseModel):
    """Virtual LAN segment record, as stored on disk and exchanged over HTTP."""

    id: Optional[UUID] = Field(default=None, description="Record id, assigned on creation")
    vid: int = Field(default=0, description="VLAN tag (1-4094)")
    name: str = Field(default="", description="Display name")
    # address + mask length; host bits are kept as given (10.0.0.1/24 stays 10.0.0.1/24)
    subnet: IPvAnyInterface = Field(description="Subnet prefix (e.g., 10.0.0.0/24)")
    gateway: IPvAnyAddress = Field(description="Gateway address inside the subnet")
    status: str = Field(default="", description="Free-form status, e.g. enabled/disabled")

    @field_validator("subnet", mode="before")
    @classmethod
    def require_prefix_length(cls, value):
        if isinstance(value, str) and "/" not in value:
            raise ValueError("subnet must be in CIDR notation (address/prefix-length)")
        return value

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json")


def validate_vlan(vlan: VLAN) -> List[str]:
    """Return one message per violated rule; an empty list means the record is valid."""
    errors: List[str] = []
    if vlan.vid < VID_MIN or vlan.vid > VID_MAX:
        errors.append(f"invalid VLAN ID {vlan.vid} (expected range {VID_MIN}..{VID_MAX})")
    if not vlan.name:
        errors.append("name must not be empty")
    # ipaddress reports False for an address of the other IP version
    if vlan.gateway not in vlan.subnet.network:
        errors.append(f"gateway {vlan.gateway} must belong to subnet {vlan.subnet}")
    return errors


def parse_vlan_id(value: str | None) -> UUID:
    """Parse the textual id used in URLs; raises MalformedInputError on garbage."""
    try:
        return UUID((value or "").strip())
    except ValueError as exc:
        raise MalformedInputError("invalid vlan id") from exc
