"""
Use Case: List / Get Communities

Admin console community listing. The full list is cached for
ADMIN_CACHE_TTL_SECONDS and invalidated by delete and restore.
"""

from uuid import UUID

from cachetools import TTLCache

from libs.result import Error, Result, Return
from src.app.services.admin_cache import COMMUNITIES_KEY, admin_cache
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import enum_value
from src.domain.entities import Community

from .dtos import CommunitiesResponse, CommunityInfo, CommunityResponse


def to_community_info(community: Community) -> CommunityInfo:
    return CommunityInfo(
        id=str(community.id),
        name=community.name,
        location=community.location,
        status=enum_value(community.status),
        subscription_plan=community.subscription_plan,
        subscription_status=enum_value(community.subscription_status),
        total_members=community.total_members,
        created_at=community.created_at.isoformat(),
    )


class ListCommunitiesUseCase:
    def __init__(self, uow: UnitOfWork, cache: TTLCache = admin_cache):
        self.uow = uow
        self.cache = cache

    async def execute(self) -> Result[CommunitiesResponse]:
        cached = self.cache.get(COMMUNITIES_KEY)
        if cached is not None:
            return Return.ok(CommunitiesResponse(communities=cached))

        async with self.uow:
            communities = await self.uow.communities.list_all()
            infos = [to_community_info(community) for community in communities]

        self.cache[COMMUNITIES_KEY] = infos
        return Return.ok(CommunitiesResponse(communities=infos))


class GetCommunityUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, community_id: UUID) -> Result[CommunityResponse]:
        """
        Errors:
            - COMMUNITY_NOT_FOUND: Community does not exist
        """
        async with self.uow:
            community = await self.uow.communities.get_by_id(community_id)
            if not community:
                return Return.err(Error("COMMUNITY_NOT_FOUND", "Community not found"))
            return Return.ok(CommunityResponse(community=to_community_info(community)))
