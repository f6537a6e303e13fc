"""
Auth service — register, login, profile and password-reset flows.

Each call is a one-shot operation against the credential store; there is no
server-side session state. Tokens come from the injected ``TokenIssuer``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from auth.jwt import InvalidToken, TokenIssuer, TokenPurpose
from auth.models import Role, User
from auth.password import hash_password, verify_password
from auth.schemas import ProfileUpdate, UserPublic
from auth.store import UserStore
from utils.errors import DuplicateEmail, InvalidCredentials, InvalidOrExpiredToken, NotFound

logger = logging.getLogger(__name__)

ResetTokenSender = Callable[[User, str], Awaitable[None]]


async def log_reset_request(user: User, token: str) -> None:
    """Default sender: no mail transport is wired, only note the request."""
    logger.info("Password reset requested for user %s; no delivery transport configured", user.id)


@dataclass
class AuthResult:
    token: str
    user: UserPublic


@dataclass
class ResetRequest:
    message: str
    reset_token: str


class AuthService:
    def __init__(
        self,
        store: UserStore,
        issuer: TokenIssuer,
        *,
        bcrypt_rounds: int = 12,
        allow_self_assigned_role: bool = True,
        reset_sender: ResetTokenSender = log_reset_request,
    ) -> None:
        self._store = store
        self._issuer = issuer
        self._rounds = bcrypt_rounds
        self._allow_role = allow_self_assigned_role
        self._send_reset = reset_sender

    def _result(self, user: User) -> AuthResult:
        return AuthResult(
            token=self._issuer.issue_session(str(user.id)),
            user=UserPublic.model_validate(user),
        )

    async def register(
        self,
        *,
        name: str,
        email: str,
        password: str,
        phone: Optional[str] = None,
        role: Optional[str] = None,
    ) -> AuthResult:
        # Fast path only; the store's unique index is authoritative.
        if await self._store.get_by_email(email) is not None:
            raise DuplicateEmail()

        if not role or not self._allow_role:
            role = Role.USER.value

        user = await self._store.create(
            name=name,
            email=email,
            password_hash=hash_password(password, rounds=self._rounds),
            phone=phone,
            role=role,
        )
        logger.info("Registered user %s (role=%s)", user.id, user.role)
        return self._result(user)

    async def login(self, *, email: str, password: str) -> AuthResult:
        user = await self._store.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise InvalidCredentials()
        logger.info("Login: %s", user.id)
        return self._result(user)

    async def get_profile(self, user_id: str) -> UserPublic:
        user = await self._store.get_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return UserPublic.model_validate(user)

    async def update_profile(self, user_id: str, update: ProfileUpdate) -> UserPublic:
        user = await self._store.get_by_id(user_id)
        if user is None:
            raise NotFound("User not found")

        fields = {
            name: value
            for name, value in update.model_dump(include={"name", "phone", "address"}).items()
            if value
        }
        if fields:
            user = await self._store.update_fields(user, fields)
            logger.info("Updated profile %s: %s", user.id, sorted(fields))
        return UserPublic.model_validate(user)

    async def forgot_password(self, email: str) -> ResetRequest:
        user = await self._store.get_by_email(email)
        if user is None:
            raise NotFound("User not found")

        token = self._issuer.issue_password_reset(str(user.id))
        await self._send_reset(user, token)
        return ResetRequest(
            message="Password reset instructions sent to email",
            reset_token=token,
        )

    async def reset_password(self, token: str, new_password: str) -> str:
        try:
            user_id = self._issuer.verify(token, TokenPurpose.PASSWORD_RESET)
        except InvalidToken:
            raise InvalidOrExpiredToken()

        user = await self._store.get_by_id(user_id)
        if user is None:
            raise InvalidOrExpiredToken()

        await self._store.set_password_hash(user, hash_password(new_password, rounds=self._rounds))
        logger.info("Password reset for user %s", user.id)
        return "Password has been reset successfully"
