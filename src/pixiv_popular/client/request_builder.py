"""URL construction for the pixiv artworks search endpoint."""

from urllib.parse import quote, urlencode

from ..config import DEFAULT_LANGUAGE, DEFAULT_SITE_URL

SEARCH_PATH_TEMPLATE = "/ajax/search/artworks/{term}"


def build_search_url(
    term: str,
    site_url: str = DEFAULT_SITE_URL,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """Build the search URL for ``term``.

    The term is used twice, as the last path segment and as the ``word``
    query parameter. Quoting is left to ``urllib.parse`` so spaces and
    reserved characters still yield a valid URL.

    Args:
        term: Search term, taken verbatim
        site_url: Pixiv site root without trailing slash
        language: Language code requested from the API

    Returns:
        Absolute search URL
    """
    if not term:
        raise ValueError("search term must not be empty")

    path = SEARCH_PATH_TEMPLATE.format(term=quote(term, safe=""))
    query = urlencode({"word": term, "lang": language}, quote_via=quote)
    return f"{site_url.rstrip('/')}{path}?{query}"
