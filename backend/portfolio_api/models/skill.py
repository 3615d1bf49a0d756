from sqlalchemy import Column, Text, case
from sqlalchemy.orm import relationship
from portfolio_api.database import Base

# Lowest to highest.
PROFICIENCY_LEVELS = ("beginner", "intermediate", "advanced", "expert")


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False, unique=True)
    proficiency_level = Column(Text, nullable=False, default="intermediate")
    category = Column(Text)
    created_at = Column(Text, nullable=False)

    projects = relationship("Project", secondary="project_skills", back_populates="skills")
    profiles = relationship("Profile", secondary="profile_skills", back_populates="skills")


def proficiency_rank():
    """SQL expression ranking proficiency tiers, so ``.desc()`` puts experts first."""
    return case(
        {level: rank for rank, level in enumerate(PROFICIENCY_LEVELS)},
        value=Skill.proficiency_level,
        else_=-1,
    )
