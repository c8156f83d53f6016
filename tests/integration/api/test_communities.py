"""
Integration tests for community listings, deleted community listing,
audit log retrieval and health check.
"""

from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.entities import Community


async def create_community(db_session: AsyncSession, name: str) -> Community:
    community = Community(name=name, location="Pune")
    db_session.add(community)
    await db_session.commit()
    return community


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_list_communities_reflects_delete(client: AsyncClient, db_session: AsyncSession, admin_headers):
    """Cached listing is invalidated by a delete"""
    green = await create_community(db_session, "Green Valley")
    green_id = green.id
    await create_community(db_session, "Lake View")

    before = await client.get("/communities", headers=admin_headers)
    assert before.status_code == 200
    assert {c["name"] for c in before.json()["communities"]} == {"Green Valley", "Lake View"}

    deleted = await client.request("DELETE", f"/communities/{green_id}", headers=admin_headers)
    assert deleted.status_code == 200

    after = await client.get("/communities", headers=admin_headers)
    assert [c["name"] for c in after.json()["communities"]] == ["Lake View"]


@pytest.mark.asyncio
async def test_get_community(client: AsyncClient, db_session: AsyncSession, support_headers):
    community = await create_community(db_session, "Green Valley")

    response = await client.get(f"/communities/{community.id}", headers=support_headers)
    missing = await client.get(f"/communities/{uuid4()}", headers=support_headers)
    invalid = await client.get("/communities/not-a-uuid", headers=support_headers)

    assert response.status_code == 200
    assert response.json()["community"]["name"] == "Green Valley"
    assert response.json()["community"]["status"] == "active"
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "COMMUNITY_NOT_FOUND"
    assert invalid.status_code == 400
    assert invalid.json()["error"]["code"] == "INVALID_COMMUNITY_ID"


@pytest.mark.asyncio
async def test_list_deleted_communities(client: AsyncClient, db_session: AsyncSession, admin_headers):
    community = await create_community(db_session, "Green Valley")
    deleted = await client.request(
        "DELETE", f"/communities/{community.id}", headers=admin_headers, json={"reason": "Merged"}
    )
    backup_id = deleted.json()["backup"]["id"]

    response = await client.get("/communities/deleted", headers=admin_headers, params={"status": "pending"})
    restored = await client.get("/communities/deleted", headers=admin_headers, params={"status": "restored"})

    assert response.status_code == 200
    backups = response.json()["backups"]
    assert len(backups) == 1
    assert backups[0]["id"] == backup_id
    assert backups[0]["community_name"] == "Green Valley"
    assert backups[0]["reason"] == "Merged"
    assert backups[0]["status"] == "pending"
    assert backups[0]["canRestoreUntil"] == deleted.json()["backup"]["canRestoreUntil"]
    assert restored.json()["backups"] == []


@pytest.mark.asyncio
async def test_delete_preview_unknown_community(client: AsyncClient, admin_headers):
    response = await client.get(f"/communities/{uuid4()}/delete-preview", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "COMMUNITY_NOT_FOUND"


@pytest.mark.asyncio
async def test_audit_logs(client: AsyncClient, db_session: AsyncSession, admin_headers, support_headers):
    community = await create_community(db_session, "Green Valley")
    community_id = community.id
    await client.request("DELETE", f"/communities/{community_id}", headers=admin_headers)

    response = await client.get("/audit-logs", headers=admin_headers, params={"action": "delete_community"})
    forbidden = await client.get("/audit-logs", headers=support_headers)

    assert response.status_code == 200
    data = response.json()
    assert len(data["logs"]) == 1
    log = data["logs"][0]
    assert log["action"] == "delete_community"
    assert log["target_id"] == str(community_id)
    assert log["target_name"] == "Green Valley"
    assert log["status"] == "success"
    assert data["next_cursor"] is None
    assert forbidden.status_code == 403
