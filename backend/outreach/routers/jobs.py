from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from outreach.database import get_db
from outreach.dependencies import list_params
from outreach.models.job import Job
from outreach.schemas.base import DeleteResponse, to_document
from outreach.schemas.job import (
    JobCreate,
    JobListResponse,
    JobMutationResponse,
    JobResponse,
    JobUpdate,
)
from outreach.services.company_service import resolve_company
from outreach.services.query_service import (
    ListParams,
    apply_search,
    apply_sort,
    apply_status,
    paginate,
)
from outreach.utils.ids import now_ms, time_token

router = APIRouter(prefix="/jobs", tags=["jobs"])

DAY_MS = 24 * 60 * 60 * 1000

_SORTABLE = {
    "createdAt": Job.created_at,
    "title": Job.title,
    "status": Job.status,
    "company": Job.company_name,
}


@router.post("", response_model=JobMutationResponse)
async def create_job(req: JobCreate, db: Session = Depends(get_db)):
    company = req.company
    job = Job(
        id=req.id or time_token(),
        title=req.title,
        description=req.description,
        url=req.url,
        location=req.location,
        company=to_document(company),
        company_name=(company.name or "") if company else "",
        status=req.status,
        analysis=to_document(req.analysis),
        created_at=req.created_at or now_ms(),
    )
    db.add(job)
    db.commit()
    db.refresh(job)

    # Keep the companies collection in step with job ingestion
    if company and (company.name or company.website):
        resolve_company(db, company)

    return JobMutationResponse(job=JobResponse.model_validate(job))


@router.get("", response_model=JobListResponse)
async def list_jobs(
    days: str = Query("ALL"),
    params: ListParams = Depends(list_params),
    db: Session = Depends(get_db),
):
    query = db.query(Job)
    query = apply_search(query, [Job.title, Job.company_name], params.search)
    query = apply_status(query, Job.status, params.status)
    if days != "ALL" and days.isdigit():
        query = query.filter(Job.created_at >= now_ms() - int(days) * DAY_MS)
    query = apply_sort(query, _SORTABLE, params.sort_by, params.sort_order)

    result = paginate(query, params.page, params.limit)
    return JobListResponse(
        items=[JobResponse.model_validate(j) for j in result.items],
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
    )


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: str, db: Session = Depends(get_db)):
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return JobResponse.model_validate(job)


@router.put("/{job_id}")
async def update_job(job_id: str, req: JobUpdate, db: Session = Depends(get_db)):
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        # Updating a missing job is not an error
        return {"success": True, "job": req.model_dump(by_alias=True, exclude_unset=True, mode="json")}

    for key in req.model_fields_set:
        value = getattr(req, key)
        if value is None and key not in ("analysis", "company", "url", "location"):
            continue
        setattr(job, key, to_document(value))
        if key == "company":
            job.company_name = (value.name or "") if value else ""

    db.commit()
    db.refresh(job)
    return {"success": True, "job": JobResponse.model_validate(job).model_dump(by_alias=True, mode="json")}


@router.delete("/{job_id}", response_model=DeleteResponse)
async def delete_job(job_id: str, db: Session = Depends(get_db)):
    db.query(Job).filter(Job.id == job_id).delete()
    db.commit()
    return DeleteResponse(id=job_id)
