"""
Pydantic schemas for the museum and news catalog.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ═══════════════════════════════════════════════════════════════════════════════
# Museums
# ═══════════════════════════════════════════════════════════════════════════════


class Coordinates(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Location(BaseModel):
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    coordinates: Optional[Coordinates] = None


class MuseumImage(BaseModel):
    url: str
    caption: Optional[str] = None


class TicketPrices(BaseModel):
    adult: int = 50
    child: int = 0
    senior: int = 20


class OpeningHours(BaseModel):
    open: Optional[str] = None
    close: Optional[str] = None


class ContactInfo(BaseModel):
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


class MuseumCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    location: Location = Field(default_factory=Location)
    images: List[MuseumImage] = Field(default_factory=list)
    ticket_prices: TicketPrices = Field(default_factory=TicketPrices)
    opening_hours: OpeningHours = Field(default_factory=OpeningHours)
    contact_info: ContactInfo = Field(default_factory=ContactInfo)
    featured: bool = False


class MuseumUpdate(BaseModel):
    """Partial update: falsy fields are left alone, ``featured`` applies whenever sent."""

    name: Optional[str] = None
    description: Optional[str] = None
    location: Optional[Location] = None
    images: Optional[List[MuseumImage]] = None
    ticket_prices: Optional[TicketPrices] = None
    opening_hours: Optional[OpeningHours] = None
    contact_info: Optional[ContactInfo] = None
    featured: Optional[bool] = None


class MuseumRead(BaseModel):
    id: uuid.UUID
    name: str
    description: str
    location: Location
    images: List[MuseumImage]
    ticket_prices: TicketPrices
    opening_hours: OpeningHours
    contact_info: ContactInfo
    featured: bool
    created_at: Optional[datetime] = None


# ═══════════════════════════════════════════════════════════════════════════════
# News
# ═══════════════════════════════════════════════════════════════════════════════


class NewsCreate(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    image_url: Optional[str] = None
    source: Optional[str] = None
    category: Optional[str] = None
    url: Optional[str] = None


class NewsUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None
    source: Optional[str] = None
    category: Optional[str] = None
    url: Optional[str] = None


class NewsRead(NewsCreate):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    published_at: Optional[datetime] = None


class DeleteResponse(BaseModel):
    message: str


def truthy_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v}
