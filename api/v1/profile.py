# api/v1/profile.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from services.auth import current_user_id
from services.db import User, get_session
from api.v1.schemas import ProfileUpdate, ProfileUpdateOut, UserOut

router = APIRouter()

# request field → column
_COLUMNS = {"gender": "gender", "age": "age", "height": "height_cm", "weight": "weight_kg"}


async def _load(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("", response_model=dict[str, UserOut])
async def get_profile(
    user_id: int = Depends(current_user_id),
    db: AsyncSession = Depends(get_session),
) -> dict[str, UserOut]:
    return {"user": UserOut.from_row(await _load(db, user_id))}


@router.put("", response_model=ProfileUpdateOut)
async def update_profile(
    body: ProfileUpdate,
    user_id: int = Depends(current_user_id),
    db: AsyncSession = Depends(get_session),
) -> ProfileUpdateOut:
    user = await _load(db, user_id)

    for field, value in body.model_dump(exclude_unset=True, mode="json").items():
        setattr(user, _COLUMNS[field], value)

    await db.commit()
    return ProfileUpdateOut(
        message="Profile updated successfully",
        user=UserOut.from_row(user),
    )
