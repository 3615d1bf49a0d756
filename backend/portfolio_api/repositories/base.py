"""Shared pieces of the read-only search repositories.

Each entity repository turns a :class:`TextQuery` into a parameterised
SQLAlchemy query over its own field set and maps the rows to
:class:`SearchResult` records. The search engine only sees the
:class:`SearchSource` protocol.
"""
from dataclasses import dataclass
from typing import Protocol

from portfolio_api.schemas.search import SearchResult


@dataclass(frozen=True)
class TextQuery:
    """Parameters for one substring search.

    Filters that do not apply to an entity are ignored by its repository:
    ``skill`` only narrows projects, ``category`` only narrows skills and
    ``order_by_start_date`` only affects work experience.
    """

    term: str
    skill: str | None = None
    category: str | None = None
    order_by_start_date: bool = False

    @property
    def pattern(self) -> str:
        return f"%{self.term}%"

    @property
    def skill_pattern(self) -> str | None:
        return f"%{self.skill}%" if self.skill else None


class SearchSource(Protocol):
    """A read-only entity source the search engine can scan."""

    def search(self, query: TextQuery) -> list[SearchResult]:
        """Return every record matching ``query``, in the source's own order."""
        ...


def join_text(*parts: str | None, sep: str) -> str | None:
    # Mirrors SQL CONCAT: any missing part nulls the whole value.
    if any(p is None for p in parts):
        return None
    return sep.join(parts)
