from __future__ import annotations

from pydantic import BaseModel


class ActivityItem(BaseModel):
    type: str
    calories: float
    duration: float


class PeriodStats(BaseModel):
    period: str                 # YYYY-MM-DD or YYYY-MM
    total_calories: float
    total_duration: float
    activity_count: int
    activities: list[ActivityItem]


class TypeBreakdown(BaseModel):
    type: str
    total_calories: float
    total_duration: float
    count: int


class StatsOut(BaseModel):
    stats: list[PeriodStats]
    activity_breakdown: list[TypeBreakdown]
