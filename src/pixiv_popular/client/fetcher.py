"""Blocking HTTP fetcher for search responses."""

import httpx
import structlog

from ..errors import ResponseDecodeError, TransportError

logger = structlog.get_logger()


def create_client(transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """Create the HTTP client used for searches.

    Redirects are followed, e.g. from pixiv.net to www.pixiv.net.
    """
    return httpx.Client(follow_redirects=True, transport=transport)


class SearchFetcher:
    """Performs the single GET request of a search."""

    def __init__(self, client: httpx.Client):
        """Initialize fetcher.

        Args:
            client: HTTP client to send the request with
        """
        self.client = client

    def fetch(self, url: str) -> str:
        """Fetch ``url`` and return the response body as text.

        The HTTP status is not checked: pixiv reports rejected queries
        inside the JSON body.

        Args:
            url: Absolute search URL

        Returns:
            Decoded response body

        Raises:
            TransportError: No response was received
            ResponseDecodeError: The body is not valid text in its charset
        """
        logger.debug("fetching_search_response", url=url)

        try:
            response = self.client.get(url)
        except httpx.DecodingError as e:
            logger.warning("response_decode_failed", url=url, error=str(e))
            raise ResponseDecodeError(f"Could not decode the response body: {e}") from e
        except httpx.RequestError as e:
            logger.warning("search_request_failed", url=url, error=str(e))
            raise TransportError(f"Request to {url} failed: {e}") from e

        encoding = response.charset_encoding or "utf-8"
        logger.debug(
            "response_received",
            status_code=response.status_code,
            encoding=encoding,
            size=len(response.content),
        )

        try:
            return response.content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.warning("response_decode_failed", url=url, encoding=encoding, error=str(e))
            raise ResponseDecodeError(
                f"Could not decode the response body as {encoding}: {e}"
            ) from e
