"""
Dashboard DTOs

camelCase aliases match the admin console's dashboard payload.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class DashboardKpis(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_communities: int = Field(alias="totalCommunities")
    active_communities: int = Field(alias="activeCommunities")
    total_residents: int = Field(alias="totalResidents")
    total_managers: int = Field(alias="totalManagers")
    monthly_revenue: float = Field(alias="monthlyRevenue")


class GrowthChart(BaseModel):
    """Per-month series for the current year, January first"""

    labels: List[str]
    revenue: List[float]
    communities: List[int]


class DashboardData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kpis: DashboardKpis
    growth_chart: GrowthChart = Field(alias="growthChart")


class DashboardResponse(BaseModel):
    """Response for get dashboard use case"""

    success: bool = True
    data: DashboardData
    cached: bool
