"""Search response and result wrapper models."""

from typing import Any

from pydantic import BaseModel, Field

from .post import PopularPosts


class SearchBody(BaseModel):
    """The ``body`` object of a successful search response."""

    popular: PopularPosts


class SearchResponse(BaseModel):
    """Envelope returned by ``/ajax/search/artworks``."""

    error: bool = False
    body: SearchBody


class SearchResult(BaseModel):
    """Outcome of a single search term."""

    term: str
    url: str
    api_error: bool = False
    payload: Any = None
    popular: PopularPosts | None = None
    duration_seconds: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.popular is not None and self.popular.is_empty
