from outreach.schemas.base import CamelModel
from outreach.schemas.company import CompanyReference


class JobAnalysis(CamelModel):
    score: float = 0
    recommendation: str = "SKIP"
    reasoning: str = ""
    pain_points: list[str] = []
    matching_skills: list[str] = []


class JobCreate(CamelModel):
    id: str | None = None
    title: str
    description: str = ""
    url: str | None = None
    location: str | None = None
    company: CompanyReference | None = None
    status: str = "NEW"
    analysis: JobAnalysis | None = None
    created_at: int | None = None


class JobUpdate(CamelModel):
    title: str | None = None
    description: str | None = None
    url: str | None = None
    location: str | None = None
    company: CompanyReference | None = None
    status: str | None = None
    analysis: JobAnalysis | None = None


class JobResponse(CamelModel):
    id: str
    title: str
    description: str
    url: str | None
    location: str | None
    company: CompanyReference | None
    status: str
    analysis: JobAnalysis | None
    created_at: int


class JobMutationResponse(CamelModel):
    success: bool = True
    job: JobResponse


class JobListResponse(CamelModel):
    items: list[JobResponse]
    total: int
    page: int
    total_pages: int
