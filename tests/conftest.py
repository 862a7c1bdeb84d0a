"""Pytest fixtures for Pixiv Popular tests."""

import httpx
import pytest


def _wire_post(post_id: str, title: str, user_name: str, user_id: str) -> dict:
    return {
        "id": post_id,
        "title": title,
        "illustType": 0,
        "url": f"https://i.pximg.net/c/250x250_80_a2/img-master/{post_id}_p0.jpg",
        "userId": user_id,
        "userName": user_name,
        "tags": ["original"],
        "pageCount": 1,
    }


@pytest.fixture
def sample_post_data():
    """Sample post as returned by the pixiv API."""
    return _wire_post("98765432", "Test Artwork Title", "test_artist", "1234")


@pytest.fixture
def sample_payload():
    """Valid search payload with 2 permanent and 3 recent posts."""
    return {
        "error": False,
        "body": {
            "illustManga": {"data": [], "total": 0},
            "popular": {
                "permanent": [
                    _wire_post("100", "Permanent One", "alice", "11"),
                    _wire_post("101", "Permanent Two", "bob", "12"),
                ],
                "recent": [
                    _wire_post("200", "Recent One", "carol", "21"),
                    _wire_post("201", "Recent Two", "dave", "22"),
                    _wire_post("202", "Recent Three", "erin", "23"),
                ],
            },
            "relatedTags": [],
        },
    }


@pytest.fixture
def empty_payload():
    """Valid search payload without popular posts."""
    return {"error": False, "body": {"popular": {"recent": [], "permanent": []}}}


@pytest.fixture
def error_payload():
    """Payload pixiv returns when it rejects a query."""
    return {"error": True, "message": "Invalid search term", "body": []}


@pytest.fixture
def mock_client_factory():
    """Build httpx clients answering every request through ``handler``."""

    def factory(handler):
        return httpx.Client(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def json_client_factory(mock_client_factory):
    """Build httpx clients answering every request with a JSON payload."""

    def factory(payload, status_code: int = 200):
        return mock_client_factory(
            lambda request: httpx.Response(status_code, json=payload)
        )

    return factory
