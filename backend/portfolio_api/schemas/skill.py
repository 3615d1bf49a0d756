from typing import Literal

from pydantic import BaseModel, Field, field_validator

ProficiencyLevel = Literal["beginner", "intermediate", "advanced", "expert"]


class SkillCreate(BaseModel):
    name: str = Field(min_length=1)
    proficiency_level: ProficiencyLevel = "intermediate"
    category: str | None = None


class SkillUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    proficiency_level: ProficiencyLevel | None = None
    category: str | None = None

    @field_validator("name", "proficiency_level")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class SkillResponse(BaseModel):
    id: str
    name: str
    proficiency_level: str
    category: str | None
    created_at: str
    project_count: int = 0


class SkillProjectSummary(BaseModel):
    id: str
    title: str
    description: str | None
    created_at: str


class SkillDetailResponse(SkillResponse):
    projects: list[SkillProjectSummary] = []
