from fastapi import Depends
from sqlalchemy.orm import Session

from portfolio_api.config import settings
from portfolio_api.database import get_db
from portfolio_api.repositories import (
    ProfileSearchRepository,
    ProjectSearchRepository,
    SkillSearchRepository,
    WorkExperienceSearchRepository,
)
from portfolio_api.services.search_service import SearchEngine


def get_search_engine(db: Session = Depends(get_db)) -> SearchEngine:
    # One engine per request, bound to that request's session.
    return SearchEngine(
        profiles=ProfileSearchRepository(db),
        projects=ProjectSearchRepository(db),
        skills=SkillSearchRepository(db),
        work=WorkExperienceSearchRepository(db),
        min_query_length=settings.search_min_query_length,
        max_results=settings.search_max_results,
    )
