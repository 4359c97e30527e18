import json
from typing import Any, Dict, List, Optional

import httpx
import pydantic

from movie_watchlist.domain.exceptions import (
    ForbiddenError,
    NotFoundError,
    RequestError,
    ServerError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from movie_watchlist.domain.models.error_body import extract_error_message
from movie_watchlist.domain.models.movie import Movie, MovieDraft
from movie_watchlist.domain.ports.repositories.movie_repository import MovieRepository
from movie_watchlist.domain.ports.services.logger import LoggerPort
from movie_watchlist.infrastructure.logging.std_logger_adapter import StdLoggerAdapter

COLLECTION_PATH = "/Movies"
UNEXPECTED_SHAPE_MESSAGE = "Backend returned an unexpected movie shape"

_STATUS_ERRORS = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
}


def handle_response(response: httpx.Response) -> Any:
    """Return the decoded JSON body of a 2xx response or raise the matching error.

    204 and empty 2xx bodies resolve to ``None``.
    """
    if response.is_success:
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RequestError(
                "Backend returned a malformed JSON body", response.status_code, response.reason_phrase
            ) from exc

    status_code = response.status_code
    detail = extract_error_message(response.content, response.reason_phrase)

    error_cls = _STATUS_ERRORS.get(status_code)
    if error_cls is None and status_code >= 500:
        error_cls = ServerError
    if error_cls is None:
        error_cls = RequestError
    raise error_cls(detail, status_code, response.reason_phrase)


class MovieAPIClient(MovieRepository):
    """REST client for the backend ``/Movies`` collection.

    Holds no state between calls. An injected ``httpx.AsyncClient`` is used as is
    and never closed here; without one every call opens a short-lived client.
    """

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[LoggerPort] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = client
        self.logger = logger or StdLoggerAdapter(__name__)

    async def list(
        self,
        search: Optional[str] = None,
        genre: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> List[Movie]:
        candidates = {"search": search, "genre": genre, "sortBy": sort_by, "sortOrder": sort_order}
        params = {key: value for key, value in candidates.items() if value}

        response = await self._request("GET", COLLECTION_PATH, params=params)
        data = handle_response(response)
        if data is None:
            return []
        if not isinstance(data, list):
            raise RequestError("Expected a list of movies", response.status_code, response.reason_phrase)
        try:
            return [Movie.model_validate(item) for item in data]
        except pydantic.ValidationError as exc:
            raise RequestError(UNEXPECTED_SHAPE_MESSAGE, response.status_code, response.reason_phrase) from exc

    async def get_by_id(self, movie_id: int) -> Movie:
        response = await self._request("GET", self._movie_path(movie_id))
        return self._read_movie(response)

    async def create(self, draft: MovieDraft) -> Movie:
        response = await self._request("POST", COLLECTION_PATH, payload=draft.to_payload())
        return self._read_movie(response)

    async def update(self, movie_id: int, draft: MovieDraft) -> Movie:
        response = await self._request("PUT", self._movie_path(movie_id), payload=draft.to_payload())
        return self._read_movie(response)

    async def delete(self, movie_id: int) -> None:
        response = await self._request("DELETE", self._movie_path(movie_id))
        handle_response(response)

    def _movie_path(self, movie_id: int) -> str:
        if isinstance(movie_id, bool) or not isinstance(movie_id, int) or movie_id <= 0:
            raise ValidationError(f"Movie id must be a positive integer, got {movie_id!r}")
        return f"{COLLECTION_PATH}/{movie_id}"

    def _read_movie(self, response: httpx.Response) -> Movie:
        data = handle_response(response)
        if not isinstance(data, dict):
            raise RequestError("Expected a movie object", response.status_code, response.reason_phrase)
        try:
            return Movie.model_validate(data)
        except pydantic.ValidationError as exc:
            raise RequestError(UNEXPECTED_SHAPE_MESSAGE, response.status_code, response.reason_phrase) from exc

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        headers = {"Content-Type": "application/json"}
        if method == "GET":
            headers["Cache-Control"] = "no-store"
        content = json.dumps(payload) if payload is not None else None

        self.logger.info("http %s %s params=%s", method, url, params or {})
        try:
            if self._client is not None:
                response = await self._client.request(
                    method, url, params=params or None, headers=headers, content=content
                )
            else:
                async with httpx.AsyncClient(follow_redirects=True) as client:
                    response = await client.request(method, url, params=params or None, headers=headers, content=content)
        except httpx.RequestError as exc:
            self.logger.error("http error %s %s: %s", method, url, exc)
            raise TransportError(f"Could not reach backend: {exc}") from exc

        self.logger.info("http done %s %s status=%s", method, url, response.status_code)
        return response
