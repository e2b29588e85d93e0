import base64
import logging
from email.message import EmailMessage

import httpx
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from outreach.models.log import Log
from outreach.schemas.email import CustomEmailConfig, JobContext
from outreach.utils.ids import now_ms, time_token

logger = logging.getLogger(__name__)

PROVIDER_GMAIL = "GMAIL"
PROVIDER_CUSTOM = "CUSTOM"
STATUS_SENT = "SENT"
STATUS_FAILED = "FAILED"


class EmailSendError(Exception):
    """The provider rejected the message or could not be reached."""


def build_gmail_raw(to: str, subject: str, body: str) -> str:
    """RFC 2822 message, base64url-encoded without padding, as Gmail expects."""
    msg = EmailMessage()
    msg["To"] = to
    msg["Subject"] = subject
    msg.set_content(body, charset="utf-8")
    return base64.urlsafe_b64encode(msg.as_bytes()).decode("ascii").rstrip("=")


async def send_gmail(client: httpx.AsyncClient, url: str, access_token: str | None, to: str, subject: str, body: str) -> dict:
    if not access_token:
        raise EmailSendError("Missing Access Token")
    try:
        resp = await client.post(
            url,
            headers={"Authorization": f"Bearer {access_token}"},
            json={"raw": build_gmail_raw(to, subject, body)},
        )
    except httpx.HTTPError as exc:
        raise EmailSendError(str(exc)) from exc
    if resp.is_error:
        raise EmailSendError(resp.text)
    try:
        return resp.json()
    except ValueError:
        return {"message": resp.text}


async def send_custom(client: httpx.AsyncClient, config: CustomEmailConfig, to: str, subject: str, body: str) -> dict:
    if not config.url or not config.auth_token:
        raise EmailSendError("Missing custom email configuration")
    fields = {
        "from": f"{config.from_name} <{config.from_email}>",
        "to": to,
        "replyTo": config.reply_to,
        "subject": subject,
        "text": body,
    }
    try:
        resp = await client.post(
            config.url,
            headers={"Authorization": config.auth_token},
            # (None, value) parts send plain multipart form fields
            files={name: (None, value) for name, value in fields.items()},
        )
    except httpx.HTTPError as exc:
        raise EmailSendError(str(exc)) from exc
    if resp.is_error:
        raise EmailSendError(f"Custom API Error ({resp.status_code}): {resp.text}")
    try:
        return resp.json()
    except ValueError:
        return {"message": resp.text}


def record_send_attempt(
    db: Session,
    provider: str,
    status: str,
    recipient: str,
    subject: str,
    job_context: JobContext | None = None,
    error_message: str | None = None,
) -> Log | None:
    """Append the outcome of one send attempt. A failed write is logged, not raised."""
    log = Log(
        id=time_token(),
        job_id=job_context.id if job_context else None,
        job_title=job_context.title if job_context else None,
        recipient=recipient,
        subject=subject,
        provider=provider,
        status=status,
        error_message=error_message,
        timestamp=now_ms(),
    )
    try:
        db.add(log)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to save %s send log for %s", provider, recipient)
        return None
    return log
