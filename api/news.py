"""
News article routes.

Route prefix: /api/news
"""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, require_role
from auth.models import Role
from database.documents import DocumentStore
from database.models import NewsArticle
from utils.schemas import DeleteResponse, NewsCreate, NewsRead, NewsUpdate, truthy_fields


router = APIRouter(tags=["news"])

FEATURED_LIMIT = 6
_NEWEST_FIRST = [NewsArticle.published_at.desc()]


def _store(session: AsyncSession = Depends(db_session)) -> DocumentStore[NewsArticle]:
    return DocumentStore(session, NewsArticle, not_found_detail="News article not found")


@router.get("", response_model=List[NewsRead])
async def list_news(store: DocumentStore[NewsArticle] = Depends(_store)) -> List[NewsArticle]:
    return await store.find(order_by=_NEWEST_FIRST)


@router.get("/featured", response_model=List[NewsRead])
async def featured_news(store: DocumentStore[NewsArticle] = Depends(_store)) -> List[NewsArticle]:
    return await store.find(order_by=_NEWEST_FIRST, limit=FEATURED_LIMIT)


@router.get("/category/{category}", response_model=List[NewsRead])
async def news_by_category(
    category: str,
    store: DocumentStore[NewsArticle] = Depends(_store),
) -> List[NewsArticle]:
    return await store.find(NewsArticle.category == category, order_by=_NEWEST_FIRST)


@router.get("/{article_id}", response_model=NewsRead)
async def get_article(article_id: str, store: DocumentStore[NewsArticle] = Depends(_store)) -> NewsArticle:
    return await store.get(article_id)


@router.post("", response_model=NewsRead)
async def create_article(
    payload: NewsCreate,
    store: DocumentStore[NewsArticle] = Depends(_store),
    _admin: str = Depends(require_role(Role.ADMIN)),
) -> NewsArticle:
    return await store.create(payload.model_dump())


@router.put("/{article_id}", response_model=NewsRead)
async def update_article(
    article_id: str,
    payload: NewsUpdate,
    store: DocumentStore[NewsArticle] = Depends(_store),
    _admin: str = Depends(require_role(Role.ADMIN)),
) -> NewsArticle:
    return await store.update(article_id, truthy_fields(payload.model_dump()))


@router.delete("/{article_id}", response_model=DeleteResponse)
async def delete_article(
    article_id: str,
    store: DocumentStore[NewsArticle] = Depends(_store),
    _admin: str = Depends(require_role(Role.ADMIN)),
) -> Dict[str, str]:
    await store.delete(article_id)
    return {"message": "News article removed"}
