"""
Restoration Engine

Rehydrates a community and its dependents from a backup snapshot.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.dependents import DEPENDENT_TYPES, DependentType, empty_counts
from src.domain.entities import Community, DeletedCommunityBackup

logger = logging.getLogger(__name__)


@dataclass
class RestorationResult:
    community: Community
    restored_counts: Dict[str, int]


def repoint_record(
    record: Dict[str, Any], dependent_type: DependentType, community_id: UUID
) -> Dict[str, Any]:
    """Copy of `record` with every set community reference pointing at `community_id`"""
    repointed = dict(record)
    for field_name in dependent_type.reference_fields:
        if repointed.get(field_name) is not None:
            repointed[field_name] = str(community_id)
    return repointed


class RestorationEngine:
    """
    Reinsert a backed-up community under a new id.

    The community is created first; every dependent record is then inserted
    with its original primary key and its community references rewritten to
    the new id. Nothing is committed here: the caller commits together with
    the backup status transition.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def restore(
        self, backup: DeletedCommunityBackup, community_id: UUID
    ) -> RestorationResult:
        data = backup.community_data or {}

        community_document = dict(data.get("community") or {})
        community_document["id"] = str(community_id)
        community = Community.model_validate(community_document)
        community = await self.uow.communities.create(community)

        restored_counts = empty_counts()
        for dependent_type in DEPENDENT_TYPES:
            documents = data.get(dependent_type.key) or []
            if not documents:
                continue
            records = [
                dependent_type.model.model_validate(
                    repoint_record(document, dependent_type, community.id)
                )
                for document in documents
            ]
            restored_counts[dependent_type.key] = await self.uow.dependents[
                dependent_type.key
            ].insert_many(records)

        logger.info(
            f"Rehydrated community {community.id} from backup {backup.id}: {restored_counts}"
        )
        return RestorationResult(community=community, restored_counts=restored_counts)
