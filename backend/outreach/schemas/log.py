from typing import Literal

from outreach.schemas.base import CamelModel

Provider = Literal["GMAIL", "CUSTOM"]
SendStatus = Literal["SENT", "FAILED"]


class LogCreate(CamelModel):
    id: str | None = None
    job_id: str | None = None
    job_title: str | None = None
    recipient: str = ""
    subject: str = ""
    provider: Provider
    status: SendStatus
    error_message: str | None = None
    timestamp: int | None = None


class LogResponse(CamelModel):
    id: str
    job_id: str | None
    job_title: str | None
    recipient: str
    subject: str
    provider: str
    status: str
    error_message: str | None
    timestamp: int


class LogMutationResponse(CamelModel):
    success: bool = True
    log: LogResponse


class LogListResponse(CamelModel):
    items: list[LogResponse]
    total: int
    page: int
    total_pages: int
