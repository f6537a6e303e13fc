"""
Credential store — persistence for ``User`` rows.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.models import User
from utils.errors import DuplicateEmail

logger = logging.getLogger(__name__)


def _to_uuid(value: str | uuid.UUID) -> Optional[uuid.UUID]:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        return None


class UserStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: str | uuid.UUID) -> Optional[User]:
        uid = _to_uuid(user_id)
        if uid is None:
            return None
        return await self._session.get(User, uid)

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self._session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def create(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        phone: Optional[str],
        role: str,
    ) -> User:
        """
        Insert a user. The UNIQUE index on ``email`` decides duplicates, so
        a racing insert that slipped past a pre-check still fails cleanly.
        """
        user = User(
            id=uuid.uuid4(),
            name=name,
            email=email,
            password_hash=password_hash,
            phone=phone,
            role=role,
        )
        self._session.add(user)
        try:
            await self._session.commit()
        except IntegrityError:
            await self._session.rollback()
            logger.info("Rejected duplicate registration for %s", email)
            raise DuplicateEmail()
        await self._session.refresh(user)
        return user

    async def update_fields(self, user: User, fields: Dict[str, Any]) -> User:
        for name, value in fields.items():
            setattr(user, name, value)
        await self._session.commit()
        await self._session.refresh(user)
        return user

    async def set_password_hash(self, user: User, password_hash: str) -> None:
        user.password_hash = password_hash
        await self._session.commit()
