from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from outreach.database import get_db
from outreach.models.settings import GLOBAL_SETTINGS_ID, SettingsDocument
from outreach.schemas.base import SuccessResponse
from outreach.schemas.settings import SettingsResponse
from outreach.utils.ids import now_ms

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=SettingsResponse)
async def get_settings(db: Session = Depends(get_db)):
    doc = db.get(SettingsDocument, GLOBAL_SETTINGS_ID)
    if doc is None:
        return SettingsResponse(settings=None)
    return SettingsResponse(settings=doc.data)


@router.put("", response_model=SuccessResponse)
async def update_settings(new_settings: dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """Upsert the global settings; top-level keys in the body replace stored ones."""
    now = now_ms()
    incoming = {k: v for k, v in new_settings.items() if k not in ("id", "_id")}
    doc = db.get(SettingsDocument, GLOBAL_SETTINGS_ID)
    if doc is None:
        doc = SettingsDocument(id=GLOBAL_SETTINGS_ID, data={}, updated_at=now)
        db.add(doc)
    # Reassign so the JSON column is flagged dirty
    doc.data = {**(doc.data or {}), **incoming, "updatedAt": now}
    doc.updated_at = now
    db.commit()
    return SuccessResponse()
