from outreach.schemas.base import CamelModel


class JobContext(CamelModel):
    id: str | None = None
    title: str | None = None


class SendGmailRequest(CamelModel):
    access_token: str | None = None
    to: str
    subject: str = ""
    body: str = ""
    job_context: JobContext | None = None


class CustomEmailConfig(CamelModel):
    url: str | None = None
    auth_token: str | None = None
    from_name: str = ""
    from_email: str = ""
    reply_to: str = ""


class SendCustomEmailRequest(CamelModel):
    to: str
    subject: str = ""
    body: str = ""
    settings: CustomEmailConfig
    job_context: JobContext | None = None
