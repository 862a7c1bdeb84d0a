"""Console rendering of pixiv search results."""

from rich.console import Console

from ..config import settings
from ..models.post import PopularityMode, PopularPosts, Post
from ..models.search_result import SearchResult
from ..utils.timer import format_duration


class ResultPrinter:
    """Prints search results either verbosely or as bare artwork URLs."""

    def __init__(
        self,
        console: Console,
        simple: bool = False,
        site_url: str | None = None,
        language: str | None = None,
    ):
        """Initialize printer.

        Args:
            console: Rich console to write to
            simple: Print only artwork URLs, without headers or details
            site_url: Pixiv site root used for links, defaults to settings
            language: Language segment used for links, defaults to settings
        """
        self.console = console
        self.simple = simple
        self.site_url = site_url or settings.site_url
        self.language = language or settings.language

    def _line(self, text: str = "") -> None:
        # Titles and names are user content: no markup, emoji codes or wrapping
        self.console.print(
            text, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def print_request_notice(self) -> None:
        if not self.simple:
            self._line("Sending request to Pixiv API...")

    def print_api_error(self, result: SearchResult) -> None:
        """Print the notice and full payload of an error reported by pixiv."""
        self._line("The pixiv API returned an Error:")
        self.console.print_json(
            data=result.payload, indent=2, highlight=False, sort_keys=True
        )

    def print_empty(self, term: str) -> None:
        self._line()
        self._line(
            f"Pixiv API returned an empty list, {term} is probably not a valid Pixiv Tag!"
        )

    def print_posts(self, popular: PopularPosts, modes: list[PopularityMode]) -> int:
        """Print the selected popular lists in the given order.

        Args:
            popular: Parsed popular posts
            modes: Lists to print, in order

        Returns:
            Number of posts printed
        """
        printed = 0
        for mode in modes:
            if not self.simple:
                self._line()
                self._line()
                self._line(f"Showing {mode.adverb} popular posts: ")
            for post in popular.posts_for(mode):
                self.print_post(post)
                printed += 1
        return printed

    def print_post(self, post: Post) -> None:
        artwork_url = post.artwork_url(self.site_url, self.language)
        if self.simple:
            self._line(artwork_url)
            return

        self._line(f"Post: {artwork_url}")
        self._line(f"   -> Title: {post.title}")
        self._line(
            f"   -> Posted by: {post.author_name} "
            f"({post.user_url(self.site_url, self.language)})"
        )
        self._line()
        self._line()

    def print_elapsed(self, seconds: float) -> None:
        self._line(f"Took: {format_duration(seconds)}")
