"""Client modules for the pixiv search API."""

from .fetcher import SearchFetcher, create_client
from .interpreter import interpret_response
from .popular_search import PopularSearch
from .request_builder import build_search_url

__all__ = [
    "SearchFetcher",
    "create_client",
    "interpret_response",
    "PopularSearch",
    "build_search_url",
]
