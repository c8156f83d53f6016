from uuid import uuid4

from src.app.services.restoration_engine import repoint_record
from src.domain.dependents import get_dependent_type


def test_repoint_rewrites_only_set_reference_fields():
    old_id, new_id = str(uuid4()), uuid4()
    record = {"id": str(uuid4()), "community": None, "community_assigned": old_id, "name": "Kiran"}

    repointed = repoint_record(record, get_dependent_type("workers"), new_id)

    assert repointed["community_assigned"] == str(new_id)
    assert repointed["community"] is None
    assert repointed["name"] == "Kiran"
    assert record["community_assigned"] == old_id


def test_repoint_legacy_payment_field():
    new_id = uuid4()
    record = {"id": str(uuid4()), "community_id": str(uuid4()), "title": "Maintenance"}

    repointed = repoint_record(record, get_dependent_type("payments"), new_id)

    assert repointed["community_id"] == str(new_id)
    assert "community" not in repointed
