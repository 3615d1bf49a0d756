import logging

from fastapi import APIRouter, Depends, HTTPException

from portfolio_api.dependencies import get_search_engine
from portfolio_api.schemas.search import AdvancedSearchResponse, SearchResponse
from portfolio_api.services.search_service import InvalidQuery, SearchEngine, SourceUnavailable

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


# q is validated by the engine (trimmed length) so a short query is a 400, not a 422.
@router.get("", response_model=SearchResponse)
async def search(q: str | None = None, engine: SearchEngine = Depends(get_search_engine)):
    try:
        return engine.search(q)
    except InvalidQuery as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except SourceUnavailable as exc:
        logger.exception("Search failed for query %r", q)
        raise HTTPException(status_code=500, detail="Failed to perform search") from exc


@router.get("/advanced", response_model=AdvancedSearchResponse)
async def search_advanced(
    q: str | None = None,
    type: str | None = None,
    category: str | None = None,
    skill: str | None = None,
    engine: SearchEngine = Depends(get_search_engine),
):
    try:
        return engine.search_advanced(q, type=type, category=category, skill=skill)
    except InvalidQuery as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except SourceUnavailable as exc:
        logger.exception("Advanced search failed for query %r", q)
        raise HTTPException(status_code=500, detail="Failed to perform advanced search") from exc
