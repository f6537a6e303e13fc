"""
Request / response schemas for the auth routes.

``UserPublic`` is the only shape a user record leaves the service in; it has
no password field.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Annotated, Any, Dict, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

Address = Union[str, Dict[str, Any]]


def normalize_email(value: str) -> str:
    return value.strip().lower()


Email = Annotated[str, AfterValidator(normalize_email)]

# bcrypt only looks at the first 72 bytes and newer releases refuse longer input.
BCRYPT_MAX_BYTES = 72


def _fits_bcrypt(value: str) -> str:
    if len(value.encode()) > BCRYPT_MAX_BYTES:
        raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes")
    return value


Password = Annotated[str, AfterValidator(_fits_bcrypt)]


def _blank_as_missing(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    email: Email = Field(..., min_length=3, max_length=255)
    password: Password = Field(..., min_length=6, max_length=128)
    phone: Optional[str] = Field(default=None, max_length=32)
    role: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()

    @field_validator("role")
    @classmethod
    def _known_role(cls, v: Optional[str]) -> Optional[str]:
        if v and v not in ("user", "admin"):
            raise ValueError("role must be 'user' or 'admin'")
        return v


class LoginRequest(BaseModel):
    email: Email
    password: str


class ProfileUpdate(BaseModel):
    """Partial update; anything else in the body (email, role, …) is ignored."""

    name: Optional[str] = Field(default=None, max_length=128)
    phone: Optional[str] = Field(default=None, max_length=32)
    address: Optional[Address] = None

    @field_validator("name", "phone")
    @classmethod
    def _blank_is_unset(cls, v: Optional[str]) -> Optional[str]:
        return _blank_as_missing(v)


class ForgotPasswordRequest(BaseModel):
    email: Email


class ResetPasswordRequest(BaseModel):
    token: str
    password: Password = Field(..., min_length=6, max_length=128)


class UserPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[Address] = None
    role: str
    created_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    token: str
    user: UserPublic


class ForgotPasswordResponse(BaseModel):
    message: str
    reset_token: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
