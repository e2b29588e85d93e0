import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from outreach.config import settings
from outreach.database import get_db
from outreach.dependencies import get_http_client
from outreach.schemas.email import SendCustomEmailRequest, SendGmailRequest
from outreach.services.email_service import (
    PROVIDER_CUSTOM,
    PROVIDER_GMAIL,
    STATUS_FAILED,
    STATUS_SENT,
    EmailSendError,
    record_send_attempt,
    send_custom,
    send_gmail,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["email"])


@router.post("/send-email")
async def send_email(
    req: SendGmailRequest,
    db: Session = Depends(get_db),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    status, error_message = STATUS_FAILED, None
    try:
        data = await send_gmail(client, settings.gmail_send_url, req.access_token, req.to, req.subject, req.body)
        status = STATUS_SENT
        return data
    except EmailSendError as exc:
        logger.error("Gmail send to %s failed: %s", req.to, exc)
        error_message = str(exc)
        raise HTTPException(status_code=500, detail=error_message)
    finally:
        record_send_attempt(db, PROVIDER_GMAIL, status, req.to, req.subject, req.job_context, error_message)


@router.post("/send-custom-email")
async def send_custom_email(
    req: SendCustomEmailRequest,
    db: Session = Depends(get_db),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    status, error_message = STATUS_FAILED, None
    try:
        data = await send_custom(client, req.settings, req.to, req.subject, req.body)
        status = STATUS_SENT
        return {"success": True, "data": data}
    except EmailSendError as exc:
        logger.error("Custom send to %s failed: %s", req.to, exc)
        error_message = str(exc)
        raise HTTPException(status_code=500, detail=error_message)
    finally:
        record_send_attempt(db, PROVIDER_CUSTOM, status, req.to, req.subject, req.job_context, error_message)
