"""
Use Case: Get Admin Dashboard

KPIs and growth charts for the admin console home page. The computed
payload is cached under admin_dashboard until it expires or a community
write invalidates it.
"""

import calendar
import logging
from datetime import datetime

from cachetools import TTLCache

from libs.result import Result, Return
from src.app.services.admin_cache import DASHBOARD_KEY, admin_cache
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import CommunityStatus

from .dtos import DashboardData, DashboardKpis, DashboardResponse, GrowthChart

logger = logging.getLogger(__name__)

MONTH_LABELS = list(calendar.month_abbr)[1:]


class GetDashboardUseCase:
    """
    Build the admin dashboard.

    Business Rules:
    - Revenue counts completed payments only, bucketed by payment_date month
    - monthlyRevenue covers the current calendar month
    - Growth series cover the current calendar year
    - A cached payload is returned with cached=True
    """

    def __init__(self, uow: UnitOfWork, cache: TTLCache = admin_cache):
        self.uow = uow
        self.cache = cache

    async def execute(self) -> Result[DashboardResponse]:
        cached = self.cache.get(DASHBOARD_KEY)
        if cached is not None:
            return Return.ok(DashboardResponse(data=cached, cached=True))

        now = utc_now()
        start_of_year = datetime(now.year, 1, 1)

        async with self.uow:
            total_communities = await self.uow.stats.count_communities()
            active_communities = await self.uow.stats.count_communities(CommunityStatus.active)
            total_residents = await self.uow.stats.count_residents()
            total_managers = await self.uow.stats.count_managers()
            payments = await self.uow.stats.completed_payments_since(start_of_year)
            created = await self.uow.stats.communities_created_since(start_of_year)

        revenue = [0.0] * 12
        monthly_revenue = 0.0
        for payment in payments:
            month = payment.payment_date.month
            revenue[month - 1] += payment.amount or 0
            if month == now.month:
                monthly_revenue += payment.amount or 0

        communities = [0] * 12
        for created_at in created:
            communities[created_at.month - 1] += 1

        data = DashboardData(
            kpis=DashboardKpis(
                total_communities=total_communities,
                active_communities=active_communities,
                total_residents=total_residents,
                total_managers=total_managers,
                monthly_revenue=monthly_revenue,
            ),
            growth_chart=GrowthChart(
                labels=MONTH_LABELS, revenue=revenue, communities=communities
            ),
        )
        self.cache[DASHBOARD_KEY] = data
        logger.info(f"Dashboard rebuilt: {total_communities} communities, revenue {monthly_revenue}")

        return Return.ok(DashboardResponse(data=data, cached=False))
