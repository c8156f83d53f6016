"""
Use Case: Get Delete Preview

Shows what deleting a community would remove, per dependent type.
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.snapshot_collector import SnapshotCollector
from src.app.services.unit_of_work import UnitOfWork

from .dtos import CommunitySummary, DeletePreviewResponse


class GetDeletePreviewUseCase:
    """
    Count the dependents of a community without changing anything.

    The counts use the same ownership rules as the cascade delete, so a
    deletion right after the preview removes the same numbers of records
    (barring concurrent writes).
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, community_id: UUID) -> Result[DeletePreviewResponse]:
        """
        Errors:
            - COMMUNITY_NOT_FOUND: Community does not exist
        """
        async with self.uow:
            counted = await SnapshotCollector(self.uow).count(community_id)
            if counted.is_err():
                return counted

            community = counted.value["community"]
            return Return.ok(
                DeletePreviewResponse(
                    community=CommunitySummary(
                        id=str(community.id),
                        name=community.name,
                        location=community.location,
                    ),
                    will_delete=counted.value["counts"],
                )
            )
