from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .user import UserOut


class Credentials(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=6)

    @field_validator("email")
    @classmethod
    def _normalise_email(cls, v: str) -> str:
        v = v.strip().lower()
        if "@" not in v:
            raise ValueError("invalid email address")
        return v


class TokenOut(BaseModel):
    message: str
    token: str
    user: UserOut


class ForgotPasswordIn(BaseModel):
    email: str

    @field_validator("email")
    @classmethod
    def _normalise_email(cls, v: str) -> str:
        return v.strip().lower()


class ResetPasswordIn(BaseModel):
    token: str
    password: str = Field(..., min_length=6)


class MessageOut(BaseModel):
    message: str
