from portfolio_api.models.profile import Profile, profile_skills
from portfolio_api.models.project import Project, project_skills
from portfolio_api.models.skill import Skill, PROFICIENCY_LEVELS, proficiency_rank
from portfolio_api.models.work_experience import WorkExperience

__all__ = [
    "Profile",
    "Project",
    "Skill",
    "WorkExperience",
    "profile_skills",
    "project_skills",
    "PROFICIENCY_LEVELS",
    "proficiency_rank",
]
