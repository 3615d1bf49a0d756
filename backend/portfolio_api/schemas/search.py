from typing import Literal

from pydantic import BaseModel

ResultType = Literal["profile", "project", "skill", "work"]


class SearchResult(BaseModel):
    type: ResultType
    id: str
    title: str
    description: str | None
    created_at: str
    category: str | None  # tag name for everything except skills


class SearchResponse(BaseModel):
    query: str
    total_results: int
    results: list[SearchResult]


class AdvancedSearchResponse(BaseModel):
    query: str
    type: str
    category: str
    skill: str
    total_results: int
    results: list[SearchResult]
