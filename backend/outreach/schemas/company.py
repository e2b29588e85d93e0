from pydantic import ConfigDict

from outreach.schemas.base import CamelModel


class Contact(CamelModel):
    name: str = ""
    email: str = ""
    role: str = ""
    linkedin: str | None = None


class SocialLink(CamelModel):
    platform: str = ""
    url: str = ""


class CompanyAnalysis(CamelModel):
    summary: str = ""
    pain_points: list[str] = []
    social_links: list[SocialLink] = []
    matching_skills: list[str] = []
    recommended_approach: str = ""
    sources: list[str] = []


class CompanyReference(CamelModel):
    """Company as embedded in a job posting, or a bare identity candidate."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    website: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None


class CompanyCreate(CamelModel):
    id: str | None = None
    name: str = ""
    website: str = ""
    status: str = "NEW"
    contacts: list[Contact] = []
    general_contact_email: str = ""
    skills_to_pitch: list[str] = []
    analysis: CompanyAnalysis | None = None
    created_at: int | None = None


class CompanyUpdate(CamelModel):
    name: str | None = None
    website: str | None = None
    status: str | None = None
    contacts: list[Contact] | None = None
    general_contact_email: str | None = None
    skills_to_pitch: list[str] | None = None
    analysis: CompanyAnalysis | None = None


class CompanyResponse(CamelModel):
    id: str
    name: str
    website: str
    status: str
    contacts: list[Contact]
    general_contact_email: str
    skills_to_pitch: list[str]
    analysis: CompanyAnalysis | None
    created_at: int


class CompanyMutationResponse(CamelModel):
    success: bool = True
    company: CompanyResponse


class CompanyListResponse(CamelModel):
    items: list[CompanyResponse]
    total: int
    page: int
    total_pages: int
