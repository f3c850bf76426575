from __future__ import annotations
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class Profile(BaseModel):
    gender: Gender | None = None
    age: int | None = Field(None, ge=1, le=120)
    height: float | None = Field(None, ge=50, le=300, description="cm")
    weight: float | None = Field(None, ge=20, le=500, description="kg")


class ProfileUpdate(Profile):
    """Only the fields present in the request body are written."""


class UserOut(BaseModel):
    id: int
    email: str
    profile: Profile

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_row(cls, user) -> "UserOut":
        return cls(
            id=user.id,
            email=user.email,
            profile=Profile(
                gender=user.gender,
                age=user.age,
                height=user.height_cm,
                weight=user.weight_kg,
            ),
        )


class ProfileUpdateOut(BaseModel):
    message: str
    user: UserOut
