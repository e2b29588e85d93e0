from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from outreach.database import get_db
from outreach.dependencies import list_params
from outreach.models.company import Company
from outreach.schemas.base import DeleteResponse
from outreach.schemas.company import (
    CompanyCreate,
    CompanyListResponse,
    CompanyMutationResponse,
    CompanyResponse,
    CompanyUpdate,
)
from outreach.services import company_service
from outreach.services.query_service import (
    ListParams,
    apply_search,
    apply_sort,
    apply_status,
    paginate,
)

router = APIRouter(prefix="/companies", tags=["companies"])

_SORTABLE = {
    "createdAt": Company.created_at,
    "name": Company.name,
    "status": Company.status,
    "website": Company.website,
}


@router.post("", response_model=CompanyMutationResponse)
async def create_company(req: CompanyCreate, db: Session = Depends(get_db)):
    """Create a company, or return the stored one it resolves to."""
    company, _created = company_service.create_company(db, req)
    return CompanyMutationResponse(company=CompanyResponse.model_validate(company))


@router.get("", response_model=CompanyListResponse)
async def list_companies(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    query = db.query(Company)
    query = apply_search(query, [Company.name, Company.website], params.search)
    query = apply_status(query, Company.status, params.status)
    query = apply_sort(query, _SORTABLE, params.sort_by, params.sort_order)

    result = paginate(query, params.page, params.limit)
    return CompanyListResponse(
        items=[CompanyResponse.model_validate(c) for c in result.items],
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
    )


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(company_id: str, db: Session = Depends(get_db)):
    company = db.query(Company).filter(Company.id == company_id).first()
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    return CompanyResponse.model_validate(company)


@router.put("/{company_id}")
async def update_company(company_id: str, req: CompanyUpdate, db: Session = Depends(get_db)):
    company_service.update_company(db, company_id, req)
    company = db.query(Company).filter(Company.id == company_id).first()
    if company is None:
        return {"success": True, "company": req.model_dump(by_alias=True, exclude_unset=True, mode="json")}
    return {"success": True, "company": CompanyResponse.model_validate(company).model_dump(by_alias=True, mode="json")}


@router.delete("/{company_id}", response_model=DeleteResponse)
async def delete_company(company_id: str, db: Session = Depends(get_db)):
    company_service.delete_company(db, company_id)
    return DeleteResponse(id=company_id)
