from pydantic import BaseModel, Field, field_validator

from portfolio_api.schemas.project import ProjectSkill
from portfolio_api.schemas.work_experience import WorkExperienceResponse


class ProfileCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    education: str | None = None
    github_link: str | None = None
    linkedin_link: str | None = None
    portfolio_link: str | None = None


class ProfileUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, min_length=3)
    education: str | None = None
    github_link: str | None = None
    linkedin_link: str | None = None
    portfolio_link: str | None = None

    # Omit a field to keep it; null would clear a required column.
    @field_validator("name", "email")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class ProfileSkillsUpdate(BaseModel):
    skill_ids: list[str] = Field(min_length=1)


class ProfileResponse(BaseModel):
    id: str
    name: str
    email: str
    education: str | None
    github_link: str | None
    linkedin_link: str | None
    portfolio_link: str | None
    created_at: str
    updated_at: str
    skills: list[ProjectSkill] = []
    work_experience: list[WorkExperienceResponse] = []
