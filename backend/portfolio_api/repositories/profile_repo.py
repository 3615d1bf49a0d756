from sqlalchemy import or_
from sqlalchemy.orm import Session

from portfolio_api.models.profile import Profile
from portfolio_api.repositories.base import TextQuery
from portfolio_api.schemas.search import SearchResult


def profile_to_result(profile: Profile) -> SearchResult:
    return SearchResult(
        type="profile",
        id=profile.id,
        title=profile.name,
        description=profile.education,
        created_at=profile.created_at,
        category="profile",
    )


class ProfileSearchRepository:
    """Matches the profile on name or education."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def search(self, query: TextQuery) -> list[SearchResult]:
        pattern = query.pattern
        profiles = (
            self.db.query(Profile)
            .filter(or_(Profile.name.ilike(pattern), Profile.education.ilike(pattern)))
            .order_by(Profile.created_at.desc(), Profile.id)
            .all()
        )
        return [profile_to_result(p) for p in profiles]
