"""
Auth API routes — register, login, profile, password reset.

Route prefix: /api/auth
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from auth.dependencies import get_auth_service, get_current_user_id
from auth.schemas import (
    AuthResponse,
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    MessageResponse,
    ProfileUpdate,
    RegisterRequest,
    ResetPasswordRequest,
    UserPublic,
)
from auth.service import AuthService
from config.settings import Settings, get_settings


router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse)
async def register(
    req: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Register a new user and start a session."""
    result = await service.register(
        name=req.name,
        email=req.email,
        password=req.password,
        phone=req.phone,
        role=req.role,
    )
    return {"token": result.token, "user": result.user}


@router.post("/login", response_model=AuthResponse)
async def login(
    req: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Login with email + password."""
    result = await service.login(email=req.email, password=req.password)
    return {"token": result.token, "user": result.user}


@router.get("", response_model=UserPublic)
async def get_profile(
    user_id: str = Depends(get_current_user_id),
    service: AuthService = Depends(get_auth_service),
) -> UserPublic:
    return await service.get_profile(user_id)


@router.put("/profile", response_model=UserPublic)
async def update_profile(
    update: ProfileUpdate,
    user_id: str = Depends(get_current_user_id),
    service: AuthService = Depends(get_auth_service),
) -> UserPublic:
    return await service.update_profile(user_id, update)


@router.post("/forgot-password", response_model=ForgotPasswordResponse)
async def forgot_password(
    req: ForgotPasswordRequest,
    service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    result = await service.forgot_password(req.email)
    body: Dict[str, Any] = {"message": result.message}
    if settings.expose_reset_token:
        body["reset_token"] = result.reset_token
    return body


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    req: ResetPasswordRequest,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    message = await service.reset_password(req.token, req.password)
    return {"message": message}
