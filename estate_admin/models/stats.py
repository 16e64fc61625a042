"""Derived statistics and report models."""

from typing import Optional

from pydantic import BaseModel, Field

from estate_admin.models.common import UtcDatetime


class StatsData(BaseModel):
    """Month-over-month figure for one collection."""
    total: int = Field(..., ge=0)
    monthly_change: int = Field(..., ge=0, description="Absolute percentage change, rounded")
    is_positive: bool


class PropertyStats(StatsData):
    total_views: int = 0
    views_change: int = 0
    is_views_change_positive: bool = True


class ViewsData(BaseModel):
    total_views: int = 0
    last_month_views: int = 0
    this_month_views: int = 0


class ViewsSnapshot(BaseModel):
    """Rolling record of aggregate listing views, persisted under its own key."""
    period_start: UtcDatetime
    baseline_views: int = Field(default=0, description="Aggregate views when the current window opened")
    last_month_views: int = 0
    this_month_views: int = 0
    total_views: int = 0
    updated_at: Optional[UtcDatetime] = None


class PopularProperty(BaseModel):
    title: str
    views: int
    favorites: int = 0
    inquiries: int = 0


class ReportData(BaseModel):
    """Dashboard snapshot exported as CSV."""
    date: UtcDatetime
    property_stats: PropertyStats
    user_stats: StatsData
    inquiry_stats: StatsData
    views_data: ViewsData
    popular_properties: list[PopularProperty] = Field(default_factory=list)
