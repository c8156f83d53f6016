from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from cachetools import TTLCache
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from src.app.services.admin_cache import COMMUNITIES_KEY, DASHBOARD_KEY
from src.app.services.audit_recorder import AdminActor, RequestOrigin
from src.app.services.community_locks import CommunityLocks
from src.app.use_cases.communities.delete_community_use_case import DeleteCommunityUseCase
from src.domain.dependents import DEPENDENT_KEYS
from src.domain.entities import (
    AuditStatus,
    BackupStatus,
    Community,
    Notification,
    Resident,
    Worker,
)


@pytest.fixture
def actor():
    return AdminActor(admin_id=uuid4(), email="root@admin.com", role="super-admin")


@pytest.fixture
def community():
    return Community(id=uuid4(), name="Green Valley", location="Pune")


@pytest.fixture
def cache():
    cache = TTLCache(maxsize=16, ttl=60)
    cache[COMMUNITIES_KEY] = ["stale"]
    cache[DASHBOARD_KEY] = {"stale": True}
    return cache


def make_use_case(mock_uow, cache, locks=None):
    return DeleteCommunityUseCase(
        mock_uow, cache=cache, locks=locks or CommunityLocks(), retention_days=30
    )


def arrange_community(mock_uow, community, residents=(), workers=(), notifications=()):
    mock_uow.communities.get_by_id = AsyncMock(return_value=community)
    mock_uow.backups.create = AsyncMock(side_effect=lambda backup: backup)
    mock_uow.dependents["residents"].find_owned = AsyncMock(return_value=list(residents))
    mock_uow.dependents["workers"].find_owned = AsyncMock(return_value=list(workers))
    mock_uow.dependents["notifications"].find_owned = AsyncMock(
        return_value=list(notifications)
    )
    mock_uow.dependents["residents"].delete_owned = AsyncMock(return_value=len(residents))
    mock_uow.dependents["workers"].delete_owned = AsyncMock(return_value=len(workers))
    mock_uow.dependents["notifications"].delete_owned = AsyncMock(
        return_value=len(notifications)
    )


@pytest.mark.asyncio
async def test_successful_delete_backs_up_then_cascades(mock_uow, actor, community, cache):
    """Deleting a community stores a pending backup and removes every dependent"""
    # Arrange
    notification = Notification(id=uuid4(), title="Water cut")
    residents = [
        Resident(id=uuid4(), community=community.id, first_name=name, notifications=[str(notification.id)])
        for name in ("Asha", "Ravi", "Meera")
    ]
    workers = [Worker(id=uuid4(), community_assigned=community.id, name="Kiran")]
    arrange_community(mock_uow, community, residents, workers, [notification])

    # Act
    result = await make_use_case(mock_uow, cache).execute(
        actor, community.id, reason="Contract ended", origin=RequestOrigin(ip="10.0.0.1")
    )

    # Assert
    assert result.is_ok()
    response = result.value
    assert response.success is True
    assert response.message == "Community deleted successfully. Can be restored within 30 days."
    assert response.deleted["residents"] == 3
    assert response.deleted["workers"] == 1
    assert response.deleted["notifications"] == 1
    assert set(response.deleted) == set(DEPENDENT_KEYS)

    backup = mock_uow.backups.create.call_args[0][0]
    assert backup.original_community_id == community.id
    assert backup.status == BackupStatus.pending
    assert backup.reason == "Contract ended"
    assert backup.deleted_by == actor.admin_id
    assert backup.counts["residents"] == 3
    assert backup.community_data["community"]["name"] == "Green Valley"
    assert len(backup.community_data["residents"]) == 3
    assert (backup.permanent_delete_at - backup.deleted_at).days == 30
    assert response.backup.id == str(backup.id)
    assert response.backup.can_restore_until == backup.permanent_delete_at.isoformat()

    # Notifications held by owners are deleted by id
    notification_call = mock_uow.dependents["notifications"].delete_owned.call_args
    assert notification.id in notification_call.kwargs["extra_ids"]
    mock_uow.communities.delete_by_id.assert_called_once_with(community.id)

    assert cache.get(COMMUNITIES_KEY) is None
    assert cache.get(DASHBOARD_KEY) is None

    audit_entry = mock_uow.audit_logs.create.call_args[0][0]
    assert audit_entry.action == "delete_community"
    assert audit_entry.target_id == community.id
    assert audit_entry.status == AuditStatus.success
    assert audit_entry.ip == "10.0.0.1"
    assert audit_entry.log_metadata["backup_id"] == str(backup.id)


@pytest.mark.asyncio
async def test_backup_is_committed_before_any_delete(mock_uow, actor, community, cache):
    """The first commit happens before the first delete statement"""
    arrange_community(mock_uow, community)
    calls = []
    mock_uow.commit = AsyncMock(side_effect=lambda: calls.append("commit"))
    mock_uow.dependents["notifications"].delete_owned = AsyncMock(
        side_effect=lambda *args, **kwargs: calls.append("delete") or 0
    )

    result = await make_use_case(mock_uow, cache).execute(actor, community.id)

    assert result.is_ok()
    assert calls[:2] == ["commit", "delete"]


@pytest.mark.asyncio
async def test_default_reason(mock_uow, actor, community, cache):
    arrange_community(mock_uow, community)

    result = await make_use_case(mock_uow, cache).execute(actor, community.id)

    assert result.is_ok()
    backup = mock_uow.backups.create.call_args[0][0]
    assert backup.reason == "No reason provided"
    assert all(count == 0 for count in result.value.deleted.values())


@pytest.mark.asyncio
async def test_community_not_found(mock_uow, actor, cache):
    """Unknown community: no backup, no deletes"""
    mock_uow.communities.get_by_id = AsyncMock(return_value=None)
    mock_uow.backups.create = AsyncMock()

    result = await make_use_case(mock_uow, cache).execute(actor, uuid4())

    assert result.is_err()
    assert result.error.code == "COMMUNITY_NOT_FOUND"
    mock_uow.backups.create.assert_not_called()
    for repository in mock_uow.dependents.values():
        repository.find_owned.assert_not_called()
        repository.delete_owned.assert_not_called()
    assert cache.get(COMMUNITIES_KEY) == ["stale"]


@pytest.mark.asyncio
async def test_backup_failure_deletes_nothing(mock_uow, actor, community, cache):
    """BACKUP_FAILED when the backup cannot be stored"""
    arrange_community(mock_uow, community)
    mock_uow.backups.create = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("disk full")))

    result = await make_use_case(mock_uow, cache).execute(actor, community.id)

    assert result.is_err()
    assert result.error.code == "BACKUP_FAILED"
    mock_uow.rollback.assert_awaited()
    for repository in mock_uow.dependents.values():
        repository.delete_owned.assert_not_called()
    mock_uow.communities.delete_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_partial_cascade_failure_keeps_backup(mock_uow, actor, community, cache):
    """A failing step reports what was deleted and keeps the backup"""
    residents = [Resident(id=uuid4(), community=community.id, first_name="Asha")]
    arrange_community(mock_uow, community, residents)
    mock_uow.dependents["workers"].delete_owned = AsyncMock(side_effect=SQLAlchemyError("locked"))

    result = await make_use_case(mock_uow, cache).execute(actor, community.id)

    assert result.is_err()
    error = result.error
    assert error.code == "PARTIAL_CASCADE_FAILURE"
    assert error.details["failed_type"] == "workers"
    assert error.details["deleted"]["residents"] == 1
    backup = mock_uow.backups.create.call_args[0][0]
    assert error.details["backup_id"] == str(backup.id)
    mock_uow.communities.delete_by_id.assert_not_called()

    audit_entry = mock_uow.audit_logs.create.call_args[0][0]
    assert audit_entry.status == AuditStatus.partial
    assert cache.get(COMMUNITIES_KEY) is None


@pytest.mark.asyncio
async def test_audit_failure_does_not_fail_delete(mock_uow, actor, community, cache):
    arrange_community(mock_uow, community)
    mock_uow.audit_logs.create = AsyncMock(side_effect=RuntimeError("audit store down"))

    result = await make_use_case(mock_uow, cache).execute(actor, community.id)

    assert result.is_ok()
    mock_uow.communities.delete_by_id.assert_called_once_with(community.id)


@pytest.mark.asyncio
async def test_concurrent_delete_is_refused(mock_uow, actor, community, cache):
    """DELETION_IN_PROGRESS while another delete holds the community lock"""
    arrange_community(mock_uow, community)
    locks = CommunityLocks()

    async with locks.hold(community.id) as acquired:
        assert acquired
        result = await make_use_case(mock_uow, cache, locks).execute(actor, community.id)

    assert result.is_err()
    assert result.error.code == "DELETION_IN_PROGRESS"
    mock_uow.backups.create.assert_not_called()
    assert not locks.is_locked(community.id)
