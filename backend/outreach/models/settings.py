from sqlalchemy import JSON, BigInteger, Column, Text
from outreach.database import Base

GLOBAL_SETTINGS_ID = "global"


class SettingsDocument(Base):
    __tablename__ = "settings"

    id = Column(Text, primary_key=True)
    data = Column(JSON, nullable=False, default=dict)
    updated_at = Column(BigInteger, nullable=False)
