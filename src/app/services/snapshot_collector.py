"""
Snapshot Collector

Reads every record owned by a community as plain JSON data, ready to be
stored in a DeletedCommunityBackup.

Reads are issued per dependent type without a surrounding lock, so a record
written concurrently by another request may or may not be captured.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.dependents import (
    DEPENDENT_KEYS,
    DEPENDENT_TYPES,
    NOTIFICATIONS_KEY,
    notification_ids_of,
)
from src.domain.entities import Community

logger = logging.getLogger(__name__)


@dataclass
class CommunitySnapshot:
    """Community document plus one list of records per dependent type"""

    community: Dict[str, Any]
    records: Dict[str, List[Dict[str, Any]]] = field(default_factory=dict)

    def counts(self) -> Dict[str, int]:
        return {key: len(self.records.get(key, [])) for key in DEPENDENT_KEYS}

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"community": self.community}
        for key in DEPENDENT_KEYS:
            payload[key] = self.records.get(key, [])
        return payload


class SnapshotCollector:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _load_community(self, community_id: UUID) -> Result[Community]:
        community = await self.uow.communities.get_by_id(community_id)
        if not community:
            return Return.err(Error("COMMUNITY_NOT_FOUND", "Community not found"))
        return Return.ok(community)

    async def collect(self, community_id: UUID) -> Result[CommunitySnapshot]:
        """
        Capture the community and all of its dependents.

        Notifications are collected last: they include both records that
        reference the community directly and records listed by the community's
        residents, workers, security staff and managers.

        Errors:
            - COMMUNITY_NOT_FOUND: Community does not exist (no dependent reads issued)
        """
        loaded = await self._load_community(community_id)
        if loaded.is_err():
            return loaded
        community = loaded.value

        records: Dict[str, List[Dict[str, Any]]] = {}
        owner_notification_ids = set()
        for dependent_type in DEPENDENT_TYPES:
            if dependent_type.key == NOTIFICATIONS_KEY:
                continue
            rows = await self.uow.dependents[dependent_type.key].find_owned(community_id)
            if dependent_type.holds_notifications:
                owner_notification_ids |= notification_ids_of(rows)
            records[dependent_type.key] = [row.model_dump(mode="json") for row in rows]

        notifications = await self.uow.dependents[NOTIFICATIONS_KEY].find_owned(
            community_id, extra_ids=owner_notification_ids
        )
        records[NOTIFICATIONS_KEY] = [row.model_dump(mode="json") for row in notifications]

        snapshot = CommunitySnapshot(
            community=community.model_dump(mode="json"),
            records={key: records[key] for key in DEPENDENT_KEYS},
        )
        logger.info(f"Collected snapshot for community {community_id}: {snapshot.counts()}")
        return Return.ok(snapshot)

    async def count(self, community_id: UUID) -> Result[Dict[str, Any]]:
        """
        Count the records a deletion would remove, without reading them as snapshot data.

        Returns:
            Result with {"community": Community, "counts": {key: int}}
        """
        loaded = await self._load_community(community_id)
        if loaded.is_err():
            return loaded

        counts: Dict[str, int] = {}
        owner_notification_ids = set()
        for dependent_type in DEPENDENT_TYPES:
            if dependent_type.key == NOTIFICATIONS_KEY:
                continue
            repository = self.uow.dependents[dependent_type.key]
            if dependent_type.holds_notifications:
                rows = await repository.find_owned(community_id)
                owner_notification_ids |= notification_ids_of(rows)
                counts[dependent_type.key] = len(rows)
            else:
                counts[dependent_type.key] = await repository.count_owned(community_id)

        counts[NOTIFICATIONS_KEY] = await self.uow.dependents[NOTIFICATIONS_KEY].count_owned(
            community_id, extra_ids=owner_notification_ids
        )

        return Return.ok(
            {
                "community": loaded.value,
                "counts": {key: counts[key] for key in DEPENDENT_KEYS},
            }
        )
