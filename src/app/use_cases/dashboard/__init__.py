from .dtos import DashboardData, DashboardKpis, DashboardResponse, GrowthChart
from .get_dashboard_use_case import GetDashboardUseCase

__all__ = [
    "GetDashboardUseCase",
    "DashboardResponse",
    "DashboardData",
    "DashboardKpis",
    "GrowthChart",
]
