"""
Integration tests for restoring a deleted community from its backup

Covers:
- Round trip: delete then restore recreates the community under a new id
- Dependents keep their ids and point at the new community
- Backups are restored at most once and only before their deadline
"""

from datetime import timedelta
from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.base import utc_now
from src.domain.entities import (
    AuditLogEntry,
    BackupStatus,
    Community,
    DeletedCommunityBackup,
    Notification,
    Resident,
    Worker,
)


async def create_community(db_session: AsyncSession) -> tuple[Community, list[Resident], Worker]:
    """Helper to create a community with 3 residents and 1 legacy-linked worker"""
    community = Community(name="Green Valley", location="Pune")
    db_session.add(community)
    await db_session.flush()

    notification = Notification(title="Water cut")
    db_session.add(notification)
    await db_session.flush()

    residents = [
        Resident(community=community.id, first_name=name, notifications=[str(notification.id)])
        for name in ("Asha", "Ravi", "Meera")
    ]
    worker = Worker(community_assigned=community.id, name="Kiran")
    db_session.add_all(residents + [worker])
    await db_session.commit()
    return community, residents, worker


async def delete_community(client: AsyncClient, community_id, headers) -> dict:
    response = await client.request("DELETE", f"/communities/{community_id}", headers=headers)
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_delete_then_restore_round_trip(client: AsyncClient, db_session: AsyncSession, admin_headers):
    """Restore recreates the community with a new id and repoints its dependents"""
    community, residents, worker = await create_community(db_session)
    original_id = community.id
    resident_ids = {resident.id for resident in residents}
    worker_id = worker.id

    preview = await client.get(f"/communities/{original_id}/delete-preview", headers=admin_headers)
    deleted = await delete_community(client, original_id, admin_headers)
    backup_id = deleted["backup"]["id"]

    response = await client.post(f"/communities/{backup_id}/restore", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Community restored successfully"
    assert data["community"]["name"] == "Green Valley"
    assert data["community"]["location"] == "Pune"
    assert data["restored"] == deleted["deleted"] == preview.json()["willDelete"]

    new_id = UUID(data["community"]["id"])
    assert new_id != original_id
    assert await db_session.get(Community, new_id) is not None

    result = await db_session.exec(select(Resident).where(Resident.community == new_id))
    restored_residents = result.all()
    assert {resident.id for resident in restored_residents} == resident_ids
    assert {resident.first_name for resident in restored_residents} == {"Asha", "Ravi", "Meera"}

    result = await db_session.exec(select(Worker).where(Worker.id == worker_id))
    restored_worker = result.one()
    assert restored_worker.community_assigned == new_id
    assert restored_worker.community is None

    result = await db_session.exec(select(Notification))
    assert len(result.all()) == 1

    backup = await db_session.get(DeletedCommunityBackup, UUID(backup_id))
    assert backup.status == BackupStatus.restored
    assert backup.restored_community_id == new_id
    assert backup.restored_at is not None

    result = await db_session.exec(
        select(AuditLogEntry).where(AuditLogEntry.action == "restore_community")
    )
    audit_entry = result.one()
    assert audit_entry.target_id == new_id
    assert audit_entry.log_metadata["original_community_id"] == str(original_id)


@pytest.mark.asyncio
async def test_restore_twice(client: AsyncClient, db_session: AsyncSession, admin_headers):
    """Second restore of the same backup is refused and creates nothing"""
    community, _, _ = await create_community(db_session)
    deleted = await delete_community(client, community.id, admin_headers)
    backup_id = deleted["backup"]["id"]

    first = await client.post(f"/communities/{backup_id}/restore", headers=admin_headers)
    second = await client.post(f"/communities/{backup_id}/restore", headers=admin_headers)

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json()["error"]["code"] == "ALREADY_RESTORED"

    result = await db_session.exec(select(Community))
    assert len(result.all()) == 1


@pytest.mark.asyncio
async def test_restore_expired_backup(client: AsyncClient, db_session: AsyncSession, admin_headers):
    now = utc_now()
    backup = DeletedCommunityBackup(
        original_community_id=uuid4(),
        community_data={"community": {"name": "Old Town"}},
        deleted_at=now - timedelta(days=31),
        permanent_delete_at=now - timedelta(days=1),
        status=BackupStatus.pending,
    )
    db_session.add(backup)
    await db_session.commit()

    response = await client.post(f"/communities/{backup.id}/restore", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BACKUP_EXPIRED"
    result = await db_session.exec(select(Community))
    assert result.all() == []


@pytest.mark.asyncio
async def test_restore_permanently_deleted_backup(client: AsyncClient, db_session: AsyncSession, admin_headers):
    now = utc_now()
    backup = DeletedCommunityBackup(
        original_community_id=uuid4(),
        community_data={"community": {"name": "Old Town"}},
        deleted_at=now,
        permanent_delete_at=now + timedelta(days=30),
        status=BackupStatus.permanently_deleted,
    )
    db_session.add(backup)
    await db_session.commit()

    response = await client.post(f"/communities/{backup.id}/restore", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "PERMANENTLY_DELETED"


@pytest.mark.asyncio
async def test_restore_unknown_backup(client: AsyncClient, admin_headers):
    response = await client.post(f"/communities/{uuid4()}/restore", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "BACKUP_NOT_FOUND"


@pytest.mark.asyncio
async def test_restore_invalid_backup_id(client: AsyncClient, admin_headers):
    response = await client.post("/communities/not-a-uuid/restore", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_BACKUP_ID"


@pytest.mark.asyncio
async def test_restore_requires_critical_permission(client: AsyncClient, support_headers):
    response = await client.post(f"/communities/{uuid4()}/restore", headers=support_headers)

    assert response.status_code == 403
