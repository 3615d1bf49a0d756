from sqlalchemy import or_
from sqlalchemy.orm import Session

from portfolio_api.models.skill import Skill, proficiency_rank
from portfolio_api.repositories.base import TextQuery, join_text
from portfolio_api.schemas.search import SearchResult


def skill_to_result(skill: Skill) -> SearchResult:
    return SearchResult(
        type="skill",
        id=skill.id,
        title=skill.name,
        description=join_text(skill.proficiency_level, "level", skill.category, "skill", sep=" "),
        created_at=skill.created_at,
        category=skill.category,
    )


class SkillSearchRepository:
    """Matches skills on name, category or proficiency level.

    ``query.category`` adds an exact (not substring) category filter.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def search(self, query: TextQuery) -> list[SearchResult]:
        pattern = query.pattern
        q = self.db.query(Skill).filter(
            or_(
                Skill.name.ilike(pattern),
                Skill.category.ilike(pattern),
                Skill.proficiency_level.ilike(pattern),
            )
        )
        if query.category:
            q = q.filter(Skill.category == query.category)
        skills = q.order_by(proficiency_rank().desc(), Skill.name).all()
        return [skill_to_result(s) for s in skills]
