"""Pydantic models for pixiv search data structures."""

from .post import POST_FIELD_ALIASES, PopularityMode, PopularPosts, Post
from .search_request import SearchRequest
from .search_result import SearchBody, SearchResponse, SearchResult

__all__ = [
    "POST_FIELD_ALIASES",
    "PopularityMode",
    "PopularPosts",
    "Post",
    "SearchRequest",
    "SearchBody",
    "SearchResponse",
    "SearchResult",
]
