from sqlalchemy import JSON, BigInteger, Column, Index, Text
from outreach.database import Base


class Company(Base):
    __tablename__ = "companies"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    website = Column(Text, nullable=False, default="")
    status = Column(Text, nullable=False, default="NEW")
    contacts = Column(JSON, nullable=False, default=list)
    general_contact_email = Column(Text, nullable=False, default="")
    skills_to_pitch = Column(JSON, nullable=False, default=list)
    analysis = Column(JSON)
    created_at = Column(BigInteger, nullable=False)

    # Not unique: company identity is resolved in services.company_service
    __table_args__ = (
        Index("idx_companies_name", "name"),
        Index("idx_companies_created_at", "created_at"),
    )
