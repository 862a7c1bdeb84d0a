"""Search orchestrator for pixiv popular posts."""

import time

import structlog

from ..config import settings
from ..errors import PixivPopularError
from ..models.search_request import SearchRequest
from ..models.search_result import SearchResult
from .fetcher import SearchFetcher
from .interpreter import interpret_response
from .request_builder import build_search_url

logger = structlog.get_logger()


class PopularSearch:
    """Builds the request, fetches it and interprets the response."""

    def __init__(
        self,
        fetcher: SearchFetcher,
        site_url: str | None = None,
        language: str | None = None,
    ):
        """Initialize search.

        Args:
            fetcher: Fetcher performing the HTTP request
            site_url: Pixiv site root, defaults to settings
            language: Response language, defaults to settings
        """
        self.fetcher = fetcher
        self.site_url = site_url or settings.site_url
        self.language = language or settings.language

    def search(self, request: SearchRequest) -> SearchResult:
        """Run one search.

        Args:
            request: Search term and display preferences

        Returns:
            SearchResult for the term
        """
        start_time = time.perf_counter()

        url = build_search_url(request.term, self.site_url, self.language)
        logger.info("search_url_built", term=request.term, url=url)

        try:
            body = self.fetcher.fetch(url)
            result = interpret_response(request.term, url, body)
        except PixivPopularError as e:
            logger.warning("search_failed", term=request.term, error_type=type(e).__name__)
            raise

        duration = time.perf_counter() - start_time
        result = result.model_copy(update={"duration_seconds": round(duration, 4)})

        logger.info(
            "search_complete",
            term=request.term,
            api_error=result.api_error,
            total_results=result.popular.total if result.popular else 0,
            duration=f"{duration:.2f}s",
        )
        return result
