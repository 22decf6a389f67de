from __future__ import annotations

import sys
import uuid
from pathlib import Path

import pytest

# Makes the netadmin package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from netadmin.domain.errors import NotFoundError, ValidationError  # noqa: E402
from netadmin.domain.vlans import VLAN  # noqa: E402
from netadmin.repositories.vlan_store import VLANStore  # noqa: E402
from netadmin.services.vlan_service import VLANService  # noqa: E402

FIXED_ID = uuid.UUID("00000000-0000-4000-8000-000000000001")


@pytest.fixture()
def svc(tmp_path):
    return VLANService(VLANStore(tmp_path / "vlans.json"), id_factory=lambda: FIXED_ID)


def body(**overrides) -> VLAN:
    fields = {"vid": 1, "name": "eng", "subnet": "10.0.0.0/24", "gateway": "10.0.0.1", "status": "enabled"}
    fields.update(overrides)
    return VLAN(**fields)


def test_create_assigns_fresh_id_and_ignores_client_id(svc):
    created = svc.create_vlan(body(id=uuid.uuid4()))
    assert created.id == FIXED_ID
    assert svc.list_vlans() == [created]
    assert svc.get_vlan(FIXED_ID) == created


def test_create_rejects_invalid_record_without_touching_store(svc):
    with pytest.raises(ValidationError) as excinfo:
        svc.create_vlan(body(vid=5000, name=""))
    assert len(excinfo.value.messages) == 2
    assert "expected range 1..4094" in str(excinfo.value)
    assert svc.list_vlans() == []


def test_update_requires_matching_id(svc):
    created = svc.create_vlan(body())
    with pytest.raises(ValidationError, match="mismatching vlan id"):
        svc.update_vlan(created.id, body(id=uuid.uuid4()))
    with pytest.raises(ValidationError, match="mismatching vlan id"):
        svc.update_vlan(created.id, body())


def test_update_validates_and_replaces(svc):
    created = svc.create_vlan(body())
    with pytest.raises(ValidationError):
        svc.update_vlan(created.id, body(id=created.id, gateway="10.9.9.9"))

    svc.update_vlan(created.id, body(id=created.id, name="ops", status="disabled"))
    assert svc.get_vlan(created.id).name == "ops"


def test_update_and_delete_unknown_ids(svc):
    missing = uuid.uuid4()
    with pytest.raises(NotFoundError):
        svc.update_vlan(missing, body(id=missing))
    with pytest.raises(NotFoundError):
        svc.delete_vlan(missing)
