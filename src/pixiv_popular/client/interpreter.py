"""Interpretation of raw search responses."""

import json

import structlog
from pydantic import ValidationError

from ..errors import ResponseDecodeError, ShapeMismatchError
from ..models.search_result import SearchResponse, SearchResult

logger = structlog.get_logger()

SHAPE_MISMATCH_MESSAGE = (
    'Pixiv API response did not contain ["body"]["popular"], '
    "this means that pixiv has changed the way the API works."
)


def interpret_response(term: str, url: str, body: str) -> SearchResult:
    """Turn a raw response body into a search result.

    Args:
        term: Search term the response belongs to
        url: URL the response was fetched from
        body: Raw response text

    Returns:
        SearchResult flagged as an API error, or carrying the popular posts

    Raises:
        ResponseDecodeError: The body is not JSON
        ShapeMismatchError: The JSON lacks the expected structure
    """
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        logger.warning("response_not_json", url=url, error=str(e))
        raise ResponseDecodeError(
            f"Failed to parse the pixiv API response as JSON: {e}"
        ) from e

    if isinstance(payload, dict) and payload.get("error") is True:
        logger.info("api_reported_error", term=term, message=payload.get("message"))
        return SearchResult(term=term, url=url, api_error=True, payload=payload)

    try:
        response = SearchResponse.model_validate(payload)
    except ValidationError as e:
        logger.warning("response_shape_mismatch", url=url, errors=e.error_count())
        raise ShapeMismatchError(f"{SHAPE_MISMATCH_MESSAGE}\n{e}") from e

    popular = response.body.popular
    logger.debug(
        "popular_posts_parsed",
        recent=len(popular.recent),
        permanent=len(popular.permanent),
    )
    return SearchResult(term=term, url=url, payload=payload, popular=popular)
