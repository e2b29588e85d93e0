from outreach.schemas.base import CamelModel
from outreach.schemas.company import CompanyCreate, Contact
from outreach.schemas.job import JobCreate


class OutreachProfile(CamelModel):
    """The sender's own company, taken from the global settings document."""

    company_name: str = ""
    company_description: str = ""
    services: list[str] = []


class AnalyzeJobRequest(CamelModel):
    job: JobCreate
    settings: OutreachProfile


class GenerateEmailRequest(CamelModel):
    job: JobCreate
    settings: OutreachProfile


class FindEmailRequest(CamelModel):
    job: JobCreate


class AnalyzeCompanyRequest(CamelModel):
    company: CompanyCreate
    settings: OutreachProfile


class FindDecisionMakerRequest(CamelModel):
    company: CompanyCreate


class GenerateCompanyEmailRequest(CamelModel):
    company: CompanyCreate
    settings: OutreachProfile
    contact_name: str | None = None
    contact_role: str | None = None


class EmailDraft(CamelModel):
    subject: str
    body: str


class FoundEmail(CamelModel):
    email: str | None = None
    name: str | None = None
    sources: list[str] = []


class DecisionMakers(CamelModel):
    contacts: list[Contact] = []
    general_email: str = ""
    decision_maker_sources: list[str] = []
