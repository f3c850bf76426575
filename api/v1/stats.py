# api/v1/stats.py
from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.activity_stats import activity_row, summarize
from services.auth import current_user_id
from services.db import Activity, get_session
from api.v1.filters import in_window
from api.v1.schemas import StatsOut

router = APIRouter()


@router.get("", response_model=StatsOut, summary="Calories and minutes per period and per type")
async def get_stats(
    start_date: datetime | None = Query(None, alias="startDate"),
    end_date: datetime | None = Query(None, alias="endDate"),
    group_by: str = Query("day", alias="groupBy"),   # anything but "day" → month
    user_id: int = Depends(current_user_id),
    db: AsyncSession = Depends(get_session),
) -> StatsOut:
    stmt = in_window(select(Activity).where(Activity.user_id == user_id), start_date, end_date)
    rows = (await db.execute(stmt)).scalars().all()
    return StatsOut(**summarize((activity_row(a) for a in rows), group_by=group_by))
