from functools import lru_cache
from typing import Annotated

import httpx
from fastapi import Depends, Request

from movie_watchlist.domain.ports.repositories.movie_repository import MovieRepository
from movie_watchlist.domain.ports.services.logger import LoggerPort
from movie_watchlist.infrastructure.adapters.api.movie_api_client import MovieAPIClient
from movie_watchlist.infrastructure.adapters.services.backend_forwarder import BackendForwarder
from movie_watchlist.infrastructure.config.settings import Settings
from movie_watchlist.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_logger() -> LoggerPort:
    return StdLoggerAdapter(__name__)


def create_backend_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(follow_redirects=True, timeout=settings.BACKEND_TIMEOUT)


def get_backend_client(request: Request) -> httpx.AsyncClient:
    """Shared client opened in the app lifespan, so proxied calls reuse its connection pool."""
    return request.app.state.backend_client


def get_backend_forwarder(
    settings: Annotated[Settings, Depends(get_settings)],
    client: Annotated[httpx.AsyncClient, Depends(get_backend_client)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> BackendForwarder:
    return BackendForwarder(backend_origin=settings.backend_origin, client=client, logger=logger)


def get_movie_repository(
    settings: Annotated[Settings, Depends(get_settings)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> MovieRepository:
    return MovieAPIClient(base_url=settings.api_base_url, logger=logger)
