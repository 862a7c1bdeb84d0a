"""Tests for console rendering."""

import io

import pytest
from rich.console import Console


@pytest.fixture
def popular(sample_payload):
    from pixiv_popular.models.post import PopularPosts

    return PopularPosts.model_validate(sample_payload["body"]["popular"])


def _printer(simple: bool = False):
    from pixiv_popular.output.printer import ResultPrinter

    buffer = io.StringIO()
    console = Console(file=buffer, width=40)
    return ResultPrinter(console, simple=simple), buffer


def test_simple_form_prints_one_url_per_post(popular):
    """Test simple output is bare artwork URLs in list order."""
    from pixiv_popular.models.post import PopularityMode

    printer, buffer = _printer(simple=True)

    count = printer.print_posts(popular, [PopularityMode.PERMANENT, PopularityMode.RECENT])

    assert count == 5
    assert buffer.getvalue().splitlines() == [
        f"https://www.pixiv.net/en/artworks/{post_id}"
        for post_id in ["100", "101", "200", "201", "202"]
    ]


def test_verbose_form_prints_post_block(popular):
    """Test verbose output has URL, title and author lines."""
    from pixiv_popular.models.post import PopularityMode

    printer, buffer = _printer()

    printer.print_posts(popular, [PopularityMode.PERMANENT])
    lines = buffer.getvalue().splitlines()

    assert "Showing permanently popular posts:" in lines[2]
    assert lines[3:7] == [
        "Post: https://www.pixiv.net/en/artworks/100",
        "   -> Title: Permanent One",
        "   -> Posted by: alice (https://www.pixiv.net/en/users/11)",
        "",
    ]
    assert "recently" not in buffer.getvalue()


def test_titles_are_printed_verbatim():
    """Test markup-like and long titles are not interpreted or wrapped."""
    from pixiv_popular.models.post import Post

    printer, buffer = _printer()
    title = "[bold]not markup[/bold] :smile: " + "x" * 60

    printer.print_post(Post(id="1", title=title, author_name="[red]me", author_id="2"))

    assert f"   -> Title: {title}" in buffer.getvalue().splitlines()
    assert "[red]me (https://www.pixiv.net/en/users/2)" in buffer.getvalue()


def test_custom_site_url_is_used_for_links():
    """Test links follow the configured site and language."""
    from pixiv_popular.models.post import Post
    from pixiv_popular.output.printer import ResultPrinter

    buffer = io.StringIO()
    printer = ResultPrinter(
        Console(file=buffer), simple=True, site_url="https://example.test", language="ja"
    )

    printer.print_post(Post(id="5", title="t", author_name="n", author_id="6"))

    assert buffer.getvalue() == "https://example.test/ja/artworks/5\n"


def test_api_error_prints_payload(error_payload):
    """Test reported errors print the notice and the payload."""
    from pixiv_popular.models.search_result import SearchResult

    printer, buffer = _printer()
    result = SearchResult(term="bad", url="https://x", api_error=True, payload=error_payload)

    printer.print_api_error(result)
    output = buffer.getvalue()

    assert output.startswith("The pixiv API returned an Error:\n")
    assert '"error": true' in output
    assert '"message": "Invalid search term"' in output


def test_empty_message_names_term():
    """Test the empty result message contains the term."""
    printer, buffer = _printer()

    printer.print_empty("nosuchtag")

    assert "nosuchtag is probably not a valid Pixiv Tag!" in buffer.getvalue()


def test_request_notice_only_in_verbose_mode():
    """Test the request notice is suppressed in simple mode."""
    printer, buffer = _printer(simple=True)
    printer.print_request_notice()
    assert buffer.getvalue() == ""

    printer, buffer = _printer()
    printer.print_request_notice()
    assert buffer.getvalue() == "Sending request to Pixiv API...\n"


def test_elapsed_line():
    """Test the elapsed time line."""
    printer, buffer = _printer()

    printer.print_elapsed(1.2)

    assert buffer.getvalue() == "Took: 1.20s\n"


def test_verbose_post_block_ends_with_two_blank_lines():
    """Test each verbose post block is followed by two empty lines."""
    from pixiv_popular.models.post import Post

    printer, buffer = _printer()

    printer.print_post(Post(id="1", title="t", author_name="n", author_id="2"))

    assert buffer.getvalue().endswith("(https://www.pixiv.net/en/users/2)\n\n\n")


def test_api_error_payload_keys_are_sorted():
    """Test the payload dump lists keys alphabetically."""
    from pixiv_popular.models.search_result import SearchResult

    printer, buffer = _printer()
    payload = {"message": "bad", "error": True, "body": []}

    printer.print_api_error(SearchResult(term="x", url="https://x", api_error=True, payload=payload))
    output = buffer.getvalue()

    assert output.index('"body"') < output.index('"error"') < output.index('"message"')
