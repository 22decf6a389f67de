"""VLAN use cases: validation, id assignment and store orchestration."""

from __future__ import annotations

import uuid
from typing import Callable, List, Optional
from uuid import UUID

from netadmin.domain.errors import ValidationError
from netadmin.domain.vlans import VLAN, validate_vlan
from netadmin.repositories.vlan_store import VLANStore


class VLANService:
    """Runs the validator before every mutation and hands records to the store."""

    def __init__(self, store: VLANStore, id_factory: Callable[[], UUID] = uuid.uuid4) -> None:
        self.store = store
        self._id_factory = id_factory

    def list_vlans(self) -> List[VLAN]:
        return self.store.list()

    def get_vlan(self, vlan_id: UUID) -> Optional[VLAN]:
        return self.store.get(vlan_id)

    def create_vlan(self, vlan: VLAN) -> VLAN:
        """Validate and store ``vlan`` under a fresh id; any client-supplied id is ignored."""
        self._ensure_valid(vlan)
        created = vlan.model_copy(update={"id": self._id_factory()})
        self.store.save(created)
        return created

    def update_vlan(self, vlan_id: UUID, vlan: VLAN) -> VLAN:
        if vlan.id != vlan_id:
            raise ValidationError(["mismatching vlan id in request body"])
        self._ensure_valid(vlan)
        self.store.update(vlan)
        return vlan

    def delete_vlan(self, vlan_id: UUID) -> None:
        self.store.delete(vlan_id)

    @staticmethod
    def _ensure_valid(vlan: VLAN) -> None:
        errors = validate_vlan(vlan)
        if errors:
            raise ValidationError(errors)
