from portfolio_api.repositories.base import SearchSource, TextQuery
from portfolio_api.repositories.profile_repo import ProfileSearchRepository
from portfolio_api.repositories.project_repo import ProjectSearchRepository
from portfolio_api.repositories.skill_repo import SkillSearchRepository
from portfolio_api.repositories.work_experience_repo import WorkExperienceSearchRepository

__all__ = [
    "SearchSource",
    "TextQuery",
    "ProfileSearchRepository",
    "ProjectSearchRepository",
    "SkillSearchRepository",
    "WorkExperienceSearchRepository",
]
