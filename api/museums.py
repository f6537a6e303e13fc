"""
Museum catalog routes.

Route prefix: /api/museums
Reads are public; create / update / delete require the ``admin`` role.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, require_role
from auth.models import Role
from database.documents import DocumentStore, contains
from database.models import Museum
from utils.schemas import (
    DeleteResponse,
    MuseumCreate,
    MuseumRead,
    MuseumUpdate,
    truthy_fields,
)


router = APIRouter(tags=["museums"])

FEATURED_LIMIT = 7


def _store(session: AsyncSession = Depends(db_session)) -> DocumentStore[Museum]:
    return DocumentStore(session, Museum, not_found_detail="Museum not found")


def to_read(m: Museum) -> MuseumRead:
    return MuseumRead(
        id=m.id,
        name=m.name,
        description=m.description,
        location={
            "address": m.address,
            "city": m.city,
            "state": m.state,
            "country": m.country,
            "coordinates": {"latitude": m.latitude, "longitude": m.longitude},
        },
        images=m.images or [],
        ticket_prices={"adult": m.adult_price, "child": m.child_price, "senior": m.senior_price},
        opening_hours=m.opening_hours or {},
        contact_info=m.contact_info or {},
        featured=m.featured,
        created_at=m.created_at,
    )


def to_columns(data: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten the API shape (``location``, ``ticket_prices``) onto table columns.

    A supplied ``location`` replaces the stored one as a whole, coordinates
    included.
    """
    columns = dict(data)
    location = columns.pop("location", None)
    if location:
        coords = location.pop("coordinates", None) or {}
        coords = {"latitude": coords.get("latitude"), "longitude": coords.get("longitude")}
        columns.update(location)
        columns.update(coords)
    prices = columns.pop("ticket_prices", None)
    if prices:
        columns.update({f"{band}_price": value for band, value in prices.items()})
    return columns


@router.get("", response_model=List[MuseumRead])
async def list_museums(store: DocumentStore[Museum] = Depends(_store)) -> List[MuseumRead]:
    return [to_read(m) for m in await store.find(order_by=[Museum.name])]


@router.get("/featured", response_model=List[MuseumRead])
async def featured_museums(store: DocumentStore[Museum] = Depends(_store)) -> List[MuseumRead]:
    museums = await store.find(Museum.featured.is_(True), order_by=[Museum.name], limit=FEATURED_LIMIT)
    return [to_read(m) for m in museums]


@router.get("/search", response_model=List[MuseumRead])
async def search_museums(
    query: Optional[str] = Query(default=None),
    state: Optional[str] = Query(default=None),
    city: Optional[str] = Query(default=None),
    store: DocumentStore[Museum] = Depends(_store),
) -> List[MuseumRead]:
    """Substring search on name/description, exact state, substring city."""
    criteria = []
    if query:
        criteria.append(contains(Museum.name, query) | contains(Museum.description, query))
    if state and state != "all":
        criteria.append(Museum.state == state)
    if city:
        criteria.append(contains(Museum.city, city))
    return [to_read(m) for m in await store.find(*criteria, order_by=[Museum.name])]


@router.get("/state/{state}", response_model=List[MuseumRead])
async def museums_by_state(
    state: str,
    store: DocumentStore[Museum] = Depends(_store),
) -> List[MuseumRead]:
    criteria = [] if state == "all" else [Museum.state == state]
    return [to_read(m) for m in await store.find(*criteria, order_by=[Museum.name])]


@router.get("/{museum_id}", response_model=MuseumRead)
async def get_museum(museum_id: str, store: DocumentStore[Museum] = Depends(_store)) -> MuseumRead:
    return to_read(await store.get(museum_id))


@router.post("", response_model=MuseumRead)
async def create_museum(
    payload: MuseumCreate,
    store: DocumentStore[Museum] = Depends(_store),
    _admin: str = Depends(require_role(Role.ADMIN)),
) -> MuseumRead:
    return to_read(await store.create(to_columns(payload.model_dump())))


@router.put("/{museum_id}", response_model=MuseumRead)
async def update_museum(
    museum_id: str,
    payload: MuseumUpdate,
    store: DocumentStore[Museum] = Depends(_store),
    _admin: str = Depends(require_role(Role.ADMIN)),
) -> MuseumRead:
    data = payload.model_dump(exclude={"featured"})
    fields = truthy_fields(data)
    if payload.featured is not None:
        fields["featured"] = payload.featured
    return to_read(await store.update(museum_id, to_columns(fields)))


@router.delete("/{museum_id}", response_model=DeleteResponse)
async def delete_museum(
    museum_id: str,
    store: DocumentStore[Museum] = Depends(_store),
    _admin: str = Depends(require_role(Role.ADMIN)),
) -> Dict[str, str]:
    await store.delete(museum_id)
    return {"message": "Museum removed"}
