from pydantic import BaseModel, Field, field_validator


class ProjectCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    github_link: str | None = None
    live_link: str | None = None
    image_url: str | None = None
    skill_ids: list[str] = []


class ProjectUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    github_link: str | None = None
    live_link: str | None = None
    image_url: str | None = None
    # None leaves the tags alone; an empty list clears them.
    skill_ids: list[str] | None = None

    @field_validator("title", "description")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class ProjectSkill(BaseModel):
    id: str
    name: str
    proficiency_level: str
    category: str | None


class ProjectResponse(BaseModel):
    id: str
    title: str
    description: str | None
    github_link: str | None
    live_link: str | None
    image_url: str | None
    created_at: str
    updated_at: str
    skills: list[str] = []


class ProjectDetailResponse(ProjectResponse):
    skills: list[ProjectSkill] = []
