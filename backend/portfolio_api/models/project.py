from sqlalchemy import Column, ForeignKey, Table, Text
from sqlalchemy.orm import relationship
from portfolio_api.database import Base

project_skills = Table(
    "project_skills",
    Base.metadata,
    Column("project_id", Text, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", Text, ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)


class Project(Base):
    __tablename__ = "projects"

    id = Column(Text, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text)
    github_link = Column(Text)
    live_link = Column(Text)
    image_url = Column(Text)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    skills = relationship("Skill", secondary=project_skills, back_populates="projects")
