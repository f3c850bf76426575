# api/v1/auth.py
from __future__ import annotations

import logging
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from services.auth import create_token, generate_reset_token, hash_password, verify_password
from services.db import User, get_session
from services.mailer import EmailDeliveryError, send_password_reset_email
from api.v1.schemas import (
    Credentials,
    ForgotPasswordIn,
    MessageOut,
    ResetPasswordIn,
    TokenOut,
    UserOut,
)

router = APIRouter()
Logger = logging.getLogger(__name__)

_RESET_SENT = "If the email exists, a reset link has been sent"


async def _by_email(db: AsyncSession, email: str) -> User | None:
    return (
        await db.execute(select(User).where(User.email == email))
    ).scalar_one_or_none()


# ───────────────────────── register ────────────────────────
@router.post("/register", response_model=TokenOut, status_code=status.HTTP_201_CREATED)
async def register(
    body: Credentials,
    db: AsyncSession = Depends(get_session),
) -> TokenOut:
    if await _by_email(db, body.email):
        raise HTTPException(status_code=400, detail="User already exists")

    user = User(email=body.email, password_hash=hash_password(body.password))
    db.add(user)
    await db.commit()
    Logger.info("registered user %s", user.id)
    return TokenOut(
        message="User registered successfully",
        token=create_token(user.id),
        user=UserOut.from_row(user),
    )


# ───────────────────────── login ───────────────────────────
@router.post("/login", response_model=TokenOut)
async def login(
    body: Credentials,
    db: AsyncSession = Depends(get_session),
) -> TokenOut:
    user = await _by_email(db, body.email)
    if user is None or not verify_password(body.password, user.password_hash):
        Logger.warning("failed login for %s", body.email)
        raise HTTPException(status_code=401, detail="Invalid email or password")

    return TokenOut(
        message="Login successful",
        token=create_token(user.id),
        user=UserOut.from_row(user),
    )


# ───────────────────────── forgot / reset ──────────────────
@router.post("/forgot-password", response_model=MessageOut)
async def forgot_password(
    body: ForgotPasswordIn,
    db: AsyncSession = Depends(get_session),
) -> MessageOut:
    user = await _by_email(db, body.email)
    if user is None:
        # same answer either way – don't leak which emails exist
        return MessageOut(message=_RESET_SENT)

    token = generate_reset_token()
    user.reset_password_token = token
    user.reset_password_expires = datetime.utcnow() + timedelta(
        minutes=settings.reset_token_ttl_minutes
    )
    await db.commit()

    try:
        await send_password_reset_email(user.email, token)
    except EmailDeliveryError:
        Logger.exception("reset mail failed for user %s", user.id)
        raise HTTPException(status_code=500, detail="Error sending email")

    return MessageOut(message=_RESET_SENT)


@router.post("/reset-password", response_model=MessageOut)
async def reset_password(
    body: ResetPasswordIn,
    db: AsyncSession = Depends(get_session),
) -> MessageOut:
    user = (
        await db.execute(
            select(User).where(
                User.reset_password_token == body.token,
                User.reset_password_expires > datetime.utcnow(),
            )
        )
    ).scalar_one_or_none()
    if user is None:
        raise HTTPException(status_code=400, detail="Invalid or expired reset token")

    user.password_hash = hash_password(body.password)
    user.reset_password_token = None
    user.reset_password_expires = None
    await db.commit()
    return MessageOut(message="Password reset successful")
