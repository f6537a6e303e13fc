"""
SQLAlchemy ORM models for users, museums and news articles.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(128), nullable=False)
    # UNIQUE is the source of truth for "one account per email".
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=True)
    address = Column(JSON, nullable=True)  # free text or a structured object
    role = Column(String(16), nullable=False, default=Role.USER.value)
    created_at = Column(DateTime(timezone=True), default=_utcnow)


class Museum(Base):
    __tablename__ = "museums"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)

    # location, flattened so it can be filtered on
    address = Column(String(255))
    city = Column(String(128), index=True)
    state = Column(String(128), index=True)
    country = Column(String(128))
    latitude = Column(Float)
    longitude = Column(Float)

    images = Column(JSON, default=list)
    adult_price = Column(Integer, default=50)
    child_price = Column(Integer, default=0)
    senior_price = Column(Integer, default=20)
    opening_hours = Column(JSON, default=dict)
    contact_info = Column(JSON, default=dict)
    featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow)


class NewsArticle(Base):
    __tablename__ = "news"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    image_url = Column(String(1024))
    source = Column(String(255))
    category = Column(String(64), index=True)
    url = Column(String(1024))
    published_at = Column(DateTime(timezone=True), default=_utcnow)
