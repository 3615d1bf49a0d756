from sqlalchemy import or_
from sqlalchemy.orm import Session

from portfolio_api.models.work_experience import WorkExperience
from portfolio_api.repositories.base import TextQuery, join_text
from portfolio_api.schemas.search import SearchResult


def work_to_result(work: WorkExperience) -> SearchResult:
    return SearchResult(
        type="work",
        id=work.id,
        title=work.position,
        description=join_text(work.company, work.description, sep=" - "),
        created_at=work.created_at,
        category="work",
    )


class WorkExperienceSearchRepository:
    """Matches work experience on company, position or description."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def search(self, query: TextQuery) -> list[SearchResult]:
        pattern = query.pattern
        q = self.db.query(WorkExperience).filter(
            or_(
                WorkExperience.company.ilike(pattern),
                WorkExperience.position.ilike(pattern),
                WorkExperience.description.ilike(pattern),
            )
        )
        if query.order_by_start_date:
            q = q.order_by(
                WorkExperience.start_date.desc(),
                WorkExperience.created_at.desc(),
                WorkExperience.id,
            )
        else:
            q = q.order_by(WorkExperience.created_at.desc(), WorkExperience.id)
        return [work_to_result(w) for w in q.all()]
