from sqlalchemy import JSON, BigInteger, Column, Index, Text
from outreach.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Text, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    url = Column(Text)
    location = Column(Text)
    # Snapshot of the company at ingestion time; never re-synced from companies
    company = Column(JSON)
    # Denormalized from company["name"] for search
    company_name = Column(Text, nullable=False, default="")
    status = Column(Text, nullable=False, default="NEW")
    analysis = Column(JSON)
    created_at = Column(BigInteger, nullable=False)

    __table_args__ = (
        Index("idx_jobs_created_at", "created_at"),
        Index("idx_jobs_status", "status"),
    )
