import json
from typing import Callable, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from movie_watchlist.app import app
from movie_watchlist.domain.ports.repositories.movie_repository import MovieRepository
from movie_watchlist.domain.ports.services.logger import LoggerPort
from movie_watchlist.infrastructure.adapters.api.movie_api_client import MovieAPIClient
from movie_watchlist.infrastructure.config.dependencies import get_backend_client, get_settings
from movie_watchlist.infrastructure.config.settings import Settings

BACKEND_URL = "http://backend.test/api"


class RecordingBackend:
    """httpx.MockTransport handler that records requests and replays a canned response"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._respond: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(200, json=[])

    def respond_with(
        self,
        status_code: int = 200,
        *,
        json: object = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if json is not None:
                return httpx.Response(status_code, json=json, headers=headers)
            return httpx.Response(status_code, content=content or b"", headers=headers)

        self._respond = respond

    def fail_with(self, error: Exception) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            raise error

        self._respond = respond

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)


class InMemoryMoviesBackend:
    """Minimal stand-in for the movies REST backend"""

    def __init__(self):
        self.movies: Dict[int, dict] = {}
        self._next_id = 1

    def __call__(self, request: httpx.Request) -> httpx.Response:
        segments = request.url.path.rstrip("/").split("/")

        if segments[-1] == "Movies":
            if request.method == "GET":
                return httpx.Response(200, json=self._list(request.url.params))
            if request.method == "POST":
                return self._create(json.loads(request.content))
            return httpx.Response(405)

        movie_id = int(segments[-1])
        movie = self.movies.get(movie_id)
        if movie is None:
            return httpx.Response(404, json={"message": f"Movie with ID {movie_id} not found"})

        if request.method == "GET":
            return httpx.Response(200, json=movie)
        if request.method == "PUT":
            payload = json.loads(request.content)
            movie.update(
                title=payload.get("title"),
                genre=payload.get("genre"),
                rating=payload.get("rating"),
                posterImage=payload.get("posterImage"),
                updatedAt="2024-01-02T00:00:00",
            )
            return httpx.Response(200, json=movie)
        if request.method == "DELETE":
            del self.movies[movie_id]
            return httpx.Response(204)
        return httpx.Response(405)

    def _create(self, payload: dict) -> httpx.Response:
        if not payload.get("title"):
            return httpx.Response(400, json={"errors": ["Title is required"]})
        movie = {
            "id": self._next_id,
            "title": payload["title"],
            "genre": payload.get("genre"),
            "rating": payload.get("rating"),
            "posterImage": payload.get("posterImage"),
            "createdAt": "2024-01-01T00:00:00",
            "updatedAt": None,
        }
        self.movies[self._next_id] = movie
        self._next_id += 1
        return httpx.Response(201, json=movie)

    def _list(self, params: httpx.QueryParams) -> List[dict]:
        movies = list(self.movies.values())
        search = params.get("search")
        if search:
            movies = [m for m in movies if search.lower() in m["title"].lower()]
        genre = params.get("genre")
        if genre:
            movies = [m for m in movies if (m["genre"] or "").lower() == genre.lower()]

        sort_by = params.get("sortBy", "title")
        descending = params.get("sortOrder", "asc").lower() in ("desc", "z-a")
        if sort_by == "rating":
            return sorted(movies, key=lambda m: m["rating"] or 0, reverse=descending)
        return sorted(movies, key=lambda m: m["title"].lower(), reverse=descending)


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, BACKEND_API_URL=BACKEND_URL)


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest_asyncio.fixture
async def http_client(backend):
    async with httpx.AsyncClient(transport=httpx.MockTransport(backend)) as client:
        yield client


@pytest.fixture
def api_client(http_client):
    return MovieAPIClient(BACKEND_URL, client=http_client)


@pytest.fixture
def proxy_client(backend, test_settings):
    """Test client for the app with the backend replaced by a mock transport"""

    async def override_get_backend_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(backend)) as client:
            yield client

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_backend_client] = override_get_backend_client

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for use case testing"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerPort)
