# api/v1/activities.py
from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.calorie_calc import CalorieCalculator
from services.auth import current_user_id
from services.db import Activity, User, get_session
from api.v1.filters import in_window, naive_utc
from api.v1.schemas import ActivityCreate, ActivityCreated, ActivityList, ActivityOut

router = APIRouter()
Logger = logging.getLogger(__name__)
_calc = CalorieCalculator()


# ───────────────────────── list ────────────────────────────
@router.get("", response_model=ActivityList, summary="List the caller's activities")
async def list_activities(
    start_date: datetime | None = Query(None, alias="startDate"),
    end_date: datetime | None = Query(None, alias="endDate"),
    user_id: int = Depends(current_user_id),
    db: AsyncSession = Depends(get_session),
) -> ActivityList:
    stmt = in_window(select(Activity).where(Activity.user_id == user_id), start_date, end_date)
    rows = (await db.execute(stmt.order_by(Activity.start_time.desc()))).scalars().all()
    return ActivityList(
        activities=[ActivityOut.model_validate(a, from_attributes=True) for a in rows]
    )


# ───────────────────────── create ──────────────────────────
@router.post(
    "",
    response_model=ActivityCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Log an activity and compute its calories",
)
async def create_activity(
    body: ActivityCreate,
    user_id: int = Depends(current_user_id),
    db: AsyncSession = Depends(get_session),
) -> ActivityCreated:
    start, end = naive_utc(body.start_time), naive_utc(body.end_time)
    if end <= start:
        raise HTTPException(status_code=400, detail="End time must be after start time")

    duration_minutes = (end - start).total_seconds() / 60

    user = await db.get(User, user_id)
    if user is None or not user.weight_kg:
        raise HTTPException(
            status_code=400,
            detail="Please complete your profile with weight information before logging activities",
        )

    result = _calc.estimate_activity_calories(
        body.type, user.weight_kg, duration_minutes, body.distance
    )

    activity = Activity(
        user_id=user_id,
        type=body.type.value,
        start_time=start,
        end_time=end,
        duration=duration_minutes,
        distance=body.distance,
        calories_burned=result.calories_burned,
        met_value=result.met_value,
        notes=body.notes or None,
    )
    db.add(activity)
    await db.commit()
    await db.refresh(activity)
    Logger.info(
        "user %s logged %s: %.1f min, %.2f kcal (MET %.1f)",
        user_id, activity.type, duration_minutes, result.calories_burned, result.met_value,
    )
    return ActivityCreated(
        message="Activity created successfully",
        activity=ActivityOut.model_validate(activity, from_attributes=True),
    )


# ───────────────────────── delete ──────────────────────────
@router.delete(
    "/{activity_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete one of the caller's activities",
)
async def delete_activity(
    activity_id: int,
    user_id: int = Depends(current_user_id),
    db: AsyncSession = Depends(get_session),
) -> Response:
    activity = await db.get(Activity, activity_id)
    if activity is None or activity.user_id != user_id:
        raise HTTPException(status_code=404, detail="Activity not found")
    await db.delete(activity)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
