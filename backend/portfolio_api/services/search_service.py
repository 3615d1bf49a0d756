"""
Keyword search across the profile, projects, skills and work experience.

Every entity source is scanned with the same case-insensitive substring
pattern. Results are ranked by a fixed per-type weight, newest first within a
weight, and capped after sorting.
"""
import logging
from operator import attrgetter

from sqlalchemy.exc import SQLAlchemyError

from portfolio_api.repositories.base import SearchSource, TextQuery
from portfolio_api.schemas.search import AdvancedSearchResponse, SearchResponse, SearchResult

logger = logging.getLogger(__name__)

RELEVANCE = {"profile": 3, "project": 2, "skill": 2, "work": 1}
RESULT_TYPES = tuple(RELEVANCE)


class InvalidQuery(ValueError):
    pass


class SourceUnavailable(RuntimeError):
    pass


def rank_by_relevance(results: list[SearchResult]) -> list[SearchResult]:
    """Sort by weight desc, then created_at desc.

    Python's sort is stable, so sorting on the least significant key first
    yields the multi-key order. (type, id) pins down exact ties.
    """
    ranked = sorted(results, key=attrgetter("type", "id"))
    ranked.sort(key=attrgetter("created_at"), reverse=True)
    ranked.sort(key=lambda r: RELEVANCE[r.type], reverse=True)
    return ranked


class SearchEngine:
    def __init__(
        self,
        profiles: SearchSource,
        projects: SearchSource,
        skills: SearchSource,
        work: SearchSource,
        min_query_length: int = 2,
        max_results: int = 50,
    ):
        self._sources: dict[str, SearchSource] = {
            "profile": profiles,
            "project": projects,
            "skill": skills,
            "work": work,
        }
        self.min_query_length = min_query_length
        self.max_results = max_results

    def _validate(self, query: str | None) -> str:
        term = (query or "").strip()
        if len(term) < self.min_query_length:
            raise InvalidQuery(
                f"Search query must be at least {self.min_query_length} characters long"
            )
        return term

    def _scan(self, result_type: str, query: TextQuery) -> list[SearchResult]:
        try:
            return self._sources[result_type].search(query)
        except SQLAlchemyError as exc:
            raise SourceUnavailable(f"{result_type} source failed") from exc

    def _scan_all(self, query: TextQuery) -> list[SearchResult]:
        results: list[SearchResult] = []
        for result_type in RESULT_TYPES:
            results.extend(self._scan(result_type, query))
        return results

    def search(self, query: str | None) -> SearchResponse:
        term = self._validate(query)
        ranked = rank_by_relevance(self._scan_all(TextQuery(term)))
        logger.debug("search %r matched %d records", term, len(ranked))
        return SearchResponse(
            query=query,
            total_results=len(ranked),
            results=ranked[: self.max_results],
        )

    def search_advanced(
        self,
        query: str | None,
        type: str | None = None,
        category: str | None = None,
        skill: str | None = None,
    ) -> AdvancedSearchResponse:
        term = self._validate(query)

        if type in RESULT_TYPES:
            text_query = TextQuery(
                term,
                skill=skill or None,
                category=category or None,
                order_by_start_date=type == "work",
            )
            results = self._scan(type, text_query)
            if type != "work":
                # Work keeps its start_date order from the source.
                results.sort(key=attrgetter("created_at"), reverse=True)
        else:
            # Unknown or missing type searches everything, ranked like search().
            results = rank_by_relevance(self._scan_all(TextQuery(term)))

        logger.debug("advanced search %r type=%s matched %d records", term, type, len(results))
        return AdvancedSearchResponse(
            query=query,
            type=type or "all",
            category=category or "all",
            skill=skill or "all",
            total_results=len(results),
            results=results[: self.max_results],
        )
