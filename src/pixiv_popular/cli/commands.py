"""CLI commands for Pixiv Popular."""

from typing import Annotated, Optional

import structlog
import typer
from rich.console import Console

from ..client.fetcher import SearchFetcher, create_client
from ..client.popular_search import PopularSearch
from ..config import settings
from ..errors import PixivPopularError
from ..models.search_request import SearchRequest
from ..output.printer import ResultPrinter
from ..utils.logging import setup_logging
from ..utils.timer import Stopwatch

app = typer.Typer(
    name="pixiv-popular",
    help="Get the popular images of a specific search term on pixiv",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)
logger = structlog.get_logger()


def _version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        console.print(f"Pixiv Popular v{__version__}")
        raise typer.Exit()


@app.command()
def popular(
    term: Annotated[
        str,
        typer.Argument(help="The term to search for"),
    ],
    recent: Annotated[
        bool,
        typer.Option("--recent", "-r", help="Show only recently popular"),
    ] = False,
    permanent: Annotated[
        bool,
        typer.Option("--permanent", "-p", help="Show only permanently popular"),
    ] = False,
    simple: Annotated[
        bool,
        typer.Option("--simple", "-s", help="Use simple output (print only urls)"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable verbose logging"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """Search pixiv and print the popular posts for TERM."""
    # Setup logging
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(log_level, json_output=settings.log_json)

    if not term:
        raise typer.BadParameter("must not be empty", param_hint="TERM")

    request = SearchRequest(
        term=term,
        show_recent=recent,
        show_permanent=permanent,
        simple=simple,
    )
    printer = ResultPrinter(console, simple=request.simple)

    with Stopwatch() as stopwatch:
        printer.print_request_notice()

        try:
            with create_client() as client:
                result = PopularSearch(SearchFetcher(client)).search(request)
        except PixivPopularError as e:
            err_console.print(f"Error: {e}", markup=False, highlight=False, soft_wrap=True)
            raise typer.Exit(code=e.exit_code)

        if result.api_error:
            printer.print_api_error(result)
            return

        if result.is_empty:
            printer.print_empty(request.term)
            return

        printed = printer.print_posts(result.popular, request.selected_modes())
        logger.debug("posts_printed", count=printed, modes=request.selected_modes())

    if not request.simple:
        printer.print_elapsed(stopwatch.elapsed)


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
