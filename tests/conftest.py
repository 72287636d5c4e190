"""Shared fixtures

Configuration is read at import time, so the environment is prepared before
any ``watchnext`` module is imported.
"""

import os
import tempfile

os.environ.setdefault("TMDB_READ_ACCESS_TOKEN", "test-token")
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="watchnext-logs-"))

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from watchnext.api.geocode import get_geocode_service  # noqa: E402
from watchnext.api.tmdb import get_tmdb_service  # noqa: E402
from watchnext.main import app  # noqa: E402
from watchnext.services.geocode_service import GeocodeService  # noqa: E402
from watchnext.services.tmdb_service import TMDBService  # noqa: E402


class FakeUpstream:
    """Records requests and answers them from a handler"""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(200, json={})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def respond(self, status_code: int = 200, json=None, text=None):
        """Answer every request with the same response"""
        if text is not None:
            self.handler = lambda request: httpx.Response(status_code, text=text)
        else:
            self.handler = lambda request: httpx.Response(status_code, json=json)

    def fail(self, exc_type=httpx.ConnectError):
        """Raise a transport error for every request"""

        def handler(request):
            raise exc_type("connection refused", request=request)

        self.handler = handler

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def tmdb_service(upstream):
    return TMDBService("test-token", transport=httpx.MockTransport(upstream))


@pytest.fixture
def geocoder(upstream):
    return GeocodeService(transport=httpx.MockTransport(upstream))


@pytest.fixture
def client(tmdb_service, geocoder):
    app.dependency_overrides[get_tmdb_service] = lambda: tmdb_service
    app.dependency_overrides[get_geocode_service] = lambda: geocoder
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def movie_payload():
    return {
        "id": 550,
        "title": "Fight Club",
        "overview": "An insomniac office worker...",
        "release_date": "1999-10-15",
        "poster_path": "/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
        "backdrop_path": "/hZkgoQYus5vegHoetLkCJzb17zJ.jpg",
        "vote_average": 8.4,
        "vote_count": 26280,
        "popularity": 61.416,
        "genres": [{"id": 18, "name": "Drama"}],
        "original_language": "en",
        "adult": False,
        "runtime": 139,
    }


@pytest.fixture
def tv_payload():
    return {
        "id": 1399,
        "name": "Game of Thrones",
        "overview": "Seven noble families fight for control...",
        "first_air_date": "2011-04-17",
        "poster_path": "/1XS1oqL89opfnbLl8WnZY1O1uJx.jpg",
        "backdrop_path": None,
        "vote_average": 8.4,
        "vote_count": 21000,
        "popularity": 369.594,
        "genres": [{"id": 10765, "name": "Sci-Fi & Fantasy"}, {"id": 18, "name": "Drama"}],
        "original_language": "en",
        "episode_run_time": [60],
        "number_of_episodes": 73,
        "number_of_seasons": 8,
    }


@pytest.fixture
def trending_payload():
    return {
        "page": 1,
        "results": [
            {
                "id": 1,
                "title": "Trending Movie",
                "media_type": "movie",
                "overview": "A trending movie",
                "release_date": "2024-01-01",
                "poster_path": "/movie-poster.jpg",
                "backdrop_path": "/movie-backdrop.jpg",
                "vote_average": 8.5,
                "vote_count": 1000,
                "popularity": 100,
                "genre_ids": [28, 12],
                "original_language": "en",
                "adult": False,
            },
            {
                "id": 2,
                "name": "Trending TV Show",
                "media_type": "tv",
                "overview": "A trending TV show",
                "first_air_date": "2024-01-01",
                "poster_path": "/tv-poster.jpg",
                "backdrop_path": "/tv-backdrop.jpg",
                "vote_average": 8.0,
                "vote_count": 500,
                "popularity": 90,
                "genre_ids": [18, 35],
                "original_language": "en",
            },
        ],
        "total_pages": 10,
        "total_results": 200,
    }
