from pydantic import BaseModel, Field, field_validator


class WorkExperienceCreate(BaseModel):
    company: str = Field(min_length=1)
    position: str = Field(min_length=1)
    description: str | None = None
    start_date: str | None = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    end_date: str | None = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    current_job: bool = False


class WorkExperienceUpdate(BaseModel):
    company: str | None = Field(default=None, min_length=1)
    position: str | None = Field(default=None, min_length=1)
    description: str | None = None
    start_date: str | None = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    end_date: str | None = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    current_job: bool | None = None

    @field_validator("company", "position", "current_job")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class WorkExperienceResponse(BaseModel):
    id: str
    company: str
    position: str
    description: str | None
    start_date: str | None
    end_date: str | None
    current_job: bool
    created_at: str
