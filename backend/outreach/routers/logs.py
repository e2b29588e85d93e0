from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from outreach.database import get_db
from outreach.dependencies import list_params
from outreach.models.log import Log
from outreach.schemas.log import LogCreate, LogListResponse, LogMutationResponse, LogResponse
from outreach.services.query_service import ALL, ListParams, apply_search, apply_status, paginate
from outreach.utils.ids import now_ms, time_token

router = APIRouter(prefix="/logs", tags=["logs"])


@router.get("", response_model=LogListResponse)
async def list_logs(
    provider: str = Query(ALL),
    params: ListParams = Depends(list_params),
    db: Session = Depends(get_db),
):
    query = db.query(Log)
    query = apply_search(query, [Log.recipient, Log.subject, Log.job_title], params.search)
    query = apply_status(query, Log.status, params.status)
    query = apply_status(query, Log.provider, provider)
    # Newest first regardless of sortBy
    query = query.order_by(Log.timestamp.desc())

    result = paginate(query, params.page, params.limit)
    return LogListResponse(
        items=[LogResponse.model_validate(entry) for entry in result.items],
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
    )


@router.post("", response_model=LogMutationResponse)
async def create_log(req: LogCreate, db: Session = Depends(get_db)):
    log = Log(
        id=req.id or time_token(),
        job_id=req.job_id,
        job_title=req.job_title,
        recipient=req.recipient,
        subject=req.subject,
        provider=req.provider,
        status=req.status,
        error_message=req.error_message,
        timestamp=req.timestamp or now_ms(),
    )
    db.add(log)
    db.commit()
    db.refresh(log)
    return LogMutationResponse(log=LogResponse.model_validate(log))
