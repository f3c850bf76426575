from __future__ import annotations
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.calorie_calc import ActivityType


class ActivityCreate(BaseModel):
    type: ActivityType
    start_time: datetime = Field(..., alias="startTime")
    end_time: datetime = Field(..., alias="endTime")
    distance: float | None = Field(None, ge=0, description="km, running/walking")
    notes: str | None = Field(None, max_length=500)

    @field_validator("distance")
    @classmethod
    def _zero_distance_is_none(cls, v: float | None) -> float | None:
        # 0 km means "not recorded"
        return v or None

    model_config = ConfigDict(populate_by_name=True)


class ActivityOut(BaseModel):
    id: int
    user_id: int
    type: ActivityType
    start_time: datetime
    end_time: datetime
    duration: float
    distance: float | None = None
    calories_burned: float
    met_value: float
    notes: str | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ActivityList(BaseModel):
    activities: list[ActivityOut]


class ActivityCreated(BaseModel):
    message: str
    activity: ActivityOut
