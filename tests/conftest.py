import json

import pytest
from unittest.mock import MagicMock


# --- Canned API responses ---

NEWS_API_ARTICLE = {
    "source": {"id": "wired", "name": "Wired"},
    "author": "Jane Doe",
    "title": "Go 1.23 released",
    "description": "Range-over-func lands in the stable release.",
    "url": "https://www.wired.com/story/go-1-23",
    "urlToImage": "https://media.wired.com/go.jpg",
    "publishedAt": "2024-08-13T16:00:00Z",
    "content": "The Go team shipped...",
}

NEWS_API_EVERYTHING = {
    "status": "ok",
    "totalResults": 1,
    "articles": [NEWS_API_ARTICLE],
}

NEWS_API_SOURCE = {
    "id": "abc-news",
    "name": "ABC News",
    "description": "Your trusted source for breaking news.",
    "url": "https://abcnews.go.com",
    "category": "general",
    "language": "en",
    "country": "us",
}

NEWS_API_SOURCES = {
    "status": "ok",
    "sources": [NEWS_API_SOURCE],
}

NEWS_API_ERROR = {
    "status": "error",
    "code": "apiKeyInvalid",
    "message": "Your API key is invalid or incorrect.",
}


def make_response(status_code: int = 200, body=None) -> MagicMock:
    """Build a fake requests.Response. ``body`` may be a dict or raw bytes."""
    resp = MagicMock()
    resp.status_code = status_code
    if isinstance(body, (bytes, str)):
        resp.content = body.encode() if isinstance(body, str) else body
    else:
        resp.content = json.dumps(body if body is not None else {}).encode()
    return resp


@pytest.fixture
def mock_session(mocker):
    """Shared session replaced by a mock; set ``.get.return_value`` per test."""
    session = MagicMock()
    mocker.patch("headliner.client.get_session", return_value=session)
    return session
