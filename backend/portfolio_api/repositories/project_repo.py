from sqlalchemy import or_
from sqlalchemy.orm import Session

from portfolio_api.models.project import Project
from portfolio_api.models.skill import Skill
from portfolio_api.repositories.base import TextQuery
from portfolio_api.schemas.search import SearchResult


def project_to_result(project: Project) -> SearchResult:
    return SearchResult(
        type="project",
        id=project.id,
        title=project.title,
        description=project.description,
        created_at=project.created_at,
        category="project",
    )


class ProjectSearchRepository:
    """Matches projects on title or description, optionally narrowed by skill tag."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def search(self, query: TextQuery) -> list[SearchResult]:
        pattern = query.pattern
        q = self.db.query(Project).filter(
            or_(Project.title.ilike(pattern), Project.description.ilike(pattern))
        )
        if query.skill_pattern:
            # EXISTS over project_skills, so a project tagged with several
            # matching skills still appears once.
            q = q.filter(Project.skills.any(Skill.name.ilike(query.skill_pattern)))
        projects = q.order_by(Project.created_at.desc(), Project.id).all()
        return [project_to_result(p) for p in projects]
