from sqlalchemy import BigInteger, Column, Index, Text
from outreach.database import Base


class Log(Base):
    __tablename__ = "logs"

    id = Column(Text, primary_key=True)
    job_id = Column(Text)
    job_title = Column(Text)
    recipient = Column(Text, nullable=False, default="")
    subject = Column(Text, nullable=False, default="")
    provider = Column(Text, nullable=False)
    status = Column(Text, nullable=False)
    error_message = Column(Text)
    timestamp = Column(BigInteger, nullable=False)

    __table_args__ = (
        Index("idx_logs_timestamp", "timestamp"),
        Index("idx_logs_job", "job_id"),
    )
