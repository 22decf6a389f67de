"""VLAN store: in-memory map of records mirrored to a JSON file on disk."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from netadmin.core.rwlock import RWLock
from netadmin.domain.errors import NotFoundError, PersistenceError, ValidationError
from netadmin.domain.vlans import VLAN, validate_vlan
from netadmin.repositories.json_storage import read_records, write_records

logger = logging.getLogger(__name__)


class VLANStore:
    """Single source of truth for VLAN records.

    Reads (list/get) share the lock; mutations (save/update/delete) hold it
    exclusively, including the file rewrite. Every successful mutation
    rewrites the whole file before returning. When the rewrite fails the
    in-memory change is kept and PersistenceError is raised (no rollback).
    Callers only ever receive copies of stored records.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = RWLock()
        self._vlans_by_id: Dict[UUID, VLAN] = {}

        if self.path.exists():
            self._vlans_by_id = self._load()
        else:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise PersistenceError(f"failed to create {self.path.parent}: {exc}") from exc
            self._write()

    # -------------------------- reads --------------------------
    def list(self) -> List[VLAN]:
        with self._lock.read_locked():
            return [vlan.model_copy(deep=True) for vlan in self._vlans_by_id.values()]

    def get(self, vlan_id: UUID) -> Optional[VLAN]:
        with self._lock.read_locked():
            vlan = self._vlans_by_id.get(vlan_id)
            return vlan.model_copy(deep=True) if vlan is not None else None

    # ------------------------- mutations -----------------------
    def save(self, vlan: VLAN) -> None:
        """Insert or overwrite the record for ``vlan.id`` and persist."""
        vlan_id = self._require_id(vlan)
        with self._lock.write_locked():
            self._vlans_by_id[vlan_id] = vlan.model_copy(deep=True)
            self._write()

    def update(self, vlan: VLAN) -> None:
        """Replace an existing record; raises NotFoundError for unknown ids."""
        vlan_id = self._require_id(vlan)
        with self._lock.write_locked():
            if vlan_id not in self._vlans_by_id:
                raise NotFoundError(vlan_id)
            self._vlans_by_id[vlan_id] = vlan.model_copy(deep=True)
            self._write()

    def delete(self, vlan_id: UUID) -> None:
        with self._lock.write_locked():
            if vlan_id not in self._vlans_by_id:
                raise NotFoundError(vlan_id)
            del self._vlans_by_id[vlan_id]
            self._write()

    # -------------------------- file I/O -----------------------
    @staticmethod
    def _require_id(vlan: VLAN) -> UUID:
        if vlan.id is None:
            raise ValueError("VLAN id must be assigned before it is stored")
        return vlan.id

    def _load(self) -> Dict[UUID, VLAN]:
        vlans_by_id: Dict[UUID, VLAN] = {}
        for index, raw in enumerate(read_records(self.path)):
            try:
                vlan = VLAN.model_validate(raw)
            except PydanticValidationError as exc:
                raise PersistenceError(f"failed to decode VLAN #{index} in {self.path}: {exc}") from exc
            if vlan.id is None:
                raise PersistenceError(f"invalid VLAN #{index} in {self.path}: missing id")
            errors = validate_vlan(vlan)
            if errors:
                raise PersistenceError(
                    f"invalid VLAN in {self.path}: {', '.join(errors)}"
                ) from ValidationError(errors)
            if vlan.id in vlans_by_id:
                logger.warning("Duplicate VLAN id %s in %s; keeping the later entry", vlan.id, self.path)
            vlans_by_id[vlan.id] = vlan
        return vlans_by_id

    def _write(self) -> None:
        write_records(self.path, (vlan.to_json_dict() for vlan in self._vlans_by_id.values()))
