"""
FastAPI dependencies for authentication.

Provides ``db_session``, ``get_token_issuer``, ``get_auth_service``,
``get_current_user_id`` and the ``require_role`` factory used across all
protected routes.
"""

from __future__ import annotations

from typing import AsyncGenerator, Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import InvalidToken, TokenIssuer, TokenPurpose
from auth.models import Role
from auth.service import AuthService
from auth.store import UserStore
from config.settings import Settings, get_settings
from database.session import get_db_session
from utils.errors import Forbidden, Unauthorized

# auto_error=False so a missing header is reported as our own 401.
_bearer_scheme = HTTPBearer(auto_error=False)


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


def get_token_issuer(settings: Settings = Depends(get_settings)) -> TokenIssuer:
    return TokenIssuer(
        settings.jwt_secret,
        session_ttl=settings.session_token_ttl_seconds,
        reset_ttl=settings.reset_token_ttl_seconds,
    )


def get_auth_service(
    session: AsyncSession = Depends(db_session),
    issuer: TokenIssuer = Depends(get_token_issuer),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(
        UserStore(session),
        issuer,
        bcrypt_rounds=settings.bcrypt_rounds,
        allow_self_assigned_role=settings.allow_self_assigned_role,
    )


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> str:
    """
    Extract and verify the Bearer session token, returning the
    authenticated ``user_id`` (UUID string).
    """
    if credentials is None:
        raise Unauthorized()
    try:
        return issuer.verify(credentials.credentials, TokenPurpose.SESSION)
    except InvalidToken:
        raise Unauthorized()


def require_role(role: Role | str) -> Callable:
    """
    Dependency factory: the caller must hold a valid session *and* the given
    role. The role is read from the store, not the token, so a demotion
    applies immediately.
    """
    wanted = Role(role).value

    async def _check(
        user_id: str = Depends(get_current_user_id),
        session: AsyncSession = Depends(db_session),
    ) -> str:
        user = await UserStore(session).get_by_id(user_id)
        if user is None:
            raise Unauthorized()
        if user.role != wanted:
            raise Forbidden()
        return user_id

    return _check
