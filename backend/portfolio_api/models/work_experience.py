from sqlalchemy import Boolean, Column, Text
from portfolio_api.database import Base


class WorkExperience(Base):
    __tablename__ = "work_experience"

    id = Column(Text, primary_key=True)
    company = Column(Text, nullable=False)
    position = Column(Text, nullable=False)
    description = Column(Text)
    start_date = Column(Text)
    end_date = Column(Text)
    current_job = Column(Boolean, nullable=False, default=False)
    created_at = Column(Text, nullable=False)
