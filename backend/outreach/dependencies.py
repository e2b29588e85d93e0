from functools import lru_cache

import httpx
import jwt
from fastapi import Depends, Header, HTTPException, Query
from sqlalchemy.orm import Session

from outreach.config import settings
from outreach.database import get_db
from outreach.models.user import User
from outreach.services.ai_service import AIClient
from outreach.services.query_service import ALL, ListParams
from outreach.services.user_service import get_user
from outreach.utils.security import decode_access_token


def list_params(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=500),
    search: str = "",
    status: str = ALL,
    sort_by: str = Query("createdAt", alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder"),
) -> ListParams:
    return ListParams(
        page=page,
        limit=limit,
        search=search,
        status=status,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@lru_cache
def _ai_client(api_key: str, model: str, search_model: str, base_url: str | None, timeout: float) -> AIClient:
    return AIClient(api_key=api_key, model=model, search_model=search_model, base_url=base_url, timeout=timeout)


def get_ai_client() -> AIClient:
    if not settings.ai_api_key:
        raise HTTPException(status_code=500, detail="Server misconfigured: Missing API Key")
    return _ai_client(
        settings.ai_api_key,
        settings.ai_model,
        settings.ai_search_model,
        settings.ai_base_url,
        settings.http_timeout_seconds,
    )


async def get_http_client():
    async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as client:
        yield client


async def get_current_user(
    authorization: str | None = Header(None),
    db: Session = Depends(get_db),
) -> User:
    if not authorization:
        raise HTTPException(status_code=401, detail="No token provided")
    parts = authorization.split(" ")
    if len(parts) != 2 or not parts[1]:
        raise HTTPException(status_code=401, detail="Invalid token format")
    try:
        payload = decode_access_token(parts[1])
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid or expired session")
    user = get_user(db, payload.get("id", ""))
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user
