from sqlalchemy import Column, ForeignKey, Table, Text
from sqlalchemy.orm import relationship
from portfolio_api.database import Base

profile_skills = Table(
    "profile_skills",
    Base.metadata,
    Column("profile_id", Text, ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", Text, ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)
    education = Column(Text)
    github_link = Column(Text)
    linkedin_link = Column(Text)
    portfolio_link = Column(Text)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    skills = relationship("Skill", secondary=profile_skills, back_populates="profiles")
