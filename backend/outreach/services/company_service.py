"""Company identity resolution.

A company is identified first by its website host and then by its name.
Both the companies endpoint and job ingestion go through
:func:`find_existing_company`, so a company reached from either side maps to
the same record.

Matching rules:

* ``normalize_website`` trims and lowercases the URL, drops an ``http://``/``https://``
  scheme and a leading ``www.``, and keeps everything before the first ``/``.
* A stored company matches on website when its ``website`` column *contains*
  the normalized host, case-insensitively. This is a substring test, so
  ``acme.com`` also matches ``sub.acme.com`` and ``acme.com.au``.
* Failing that, a stored company matches when its ``name`` equals the trimmed
  candidate name, case-insensitively.

No lock or unique index covers name/website; two concurrent requests for the
same unseen company can each create a record.
"""
import logging
import re

from sqlalchemy import func
from sqlalchemy.orm import Session

from outreach.models.company import Company
from outreach.schemas.base import to_document
from outreach.schemas.company import CompanyCreate, CompanyReference, CompanyUpdate
from outreach.utils.ids import now_ms, time_token

logger = logging.getLogger(__name__)

UNKNOWN_COMPANY_NAME = "Unknown"
SYNC_ID_SUFFIX = "-sync"

_SCHEME_WWW_RE = re.compile(r"^(?:https?://)?(?:www\.)?", re.IGNORECASE)
_LIKE_ESCAPE = "\\"


def normalize_website(url: str | None) -> str:
    if not url:
        return ""
    clean = _SCHEME_WWW_RE.sub("", url.strip().lower(), count=1)
    return clean.split("/")[0]


def escape_like(value: str) -> str:
    return (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def find_by_website(db: Session, website: str | None) -> Company | None:
    host = normalize_website(website)
    if not host:
        return None
    pattern = f"%{escape_like(host)}%"
    return (
        db.query(Company)
        .filter(Company.website.ilike(pattern, escape=_LIKE_ESCAPE))
        .order_by(Company.created_at)
        .first()
    )


def find_by_name(db: Session, name: str | None) -> Company | None:
    trimmed = (name or "").strip()
    if not trimmed:
        return None
    return (
        db.query(Company)
        .filter(func.lower(Company.name) == trimmed.lower())
        .order_by(Company.created_at)
        .first()
    )


def find_existing_company(db: Session, name: str | None, website: str | None) -> Company | None:
    return find_by_website(db, website) or find_by_name(db, name)


def resolve_company(
    db: Session,
    candidate: CompanyReference,
    id_suffix: str = SYNC_ID_SUFFIX,
) -> Company:
    """Return the company ``candidate`` refers to, creating it if unseen.

    An existing match is returned untouched. Otherwise a ``NEW`` company is
    built from the candidate, seeded with a single contact when both contact
    name and email are known, and committed.
    """
    existing = find_existing_company(db, candidate.name, candidate.website)
    if existing is not None:
        return existing

    name = (candidate.name or "").strip()
    website = (candidate.website or "").strip()

    contacts = []
    if candidate.contact_name and candidate.contact_email:
        contacts.append({
            "name": candidate.contact_name,
            "email": candidate.contact_email,
            "role": "Unknown",
        })

    company = Company(
        id=time_token(id_suffix),
        name=name or UNKNOWN_COMPANY_NAME,
        website=website,
        status="NEW",
        contacts=contacts,
        general_contact_email=candidate.contact_email or "",
        skills_to_pitch=[],
        analysis=None,
        created_at=now_ms(),
    )
    logger.info("Auto-creating company %r", name or website or UNKNOWN_COMPANY_NAME)
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


def create_company(db: Session, req: CompanyCreate) -> tuple[Company, bool]:
    """Insert ``req`` unless it resolves to a stored company.

    Returns ``(company, created)``.
    """
    existing = find_existing_company(db, req.name, req.website)
    if existing is not None:
        return existing, False

    company = Company(
        id=req.id or time_token(),
        name=req.name,
        website=req.website,
        status=req.status,
        contacts=to_document(req.contacts),
        general_contact_email=req.general_contact_email,
        skills_to_pitch=list(req.skills_to_pitch),
        analysis=to_document(req.analysis),
        created_at=req.created_at or now_ms(),
    )
    db.add(company)
    db.commit()
    db.refresh(company)
    return company, True


def update_company(db: Session, company_id: str, req: CompanyUpdate) -> None:
    """Set the given fields on a company. A missing id is a no-op."""
    company = db.query(Company).filter(Company.id == company_id).first()
    if company is None:
        return
    for key in req.model_fields_set:
        value = getattr(req, key)
        if value is None and key != "analysis":
            continue
        setattr(company, key, to_document(value))
    db.commit()


def delete_company(db: Session, company_id: str) -> None:
    db.query(Company).filter(Company.id == company_id).delete()
    db.commit()
