from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from movie_watchlist.infrastructure.adapters.services.backend_forwarder import BackendForwarder, preflight_response
from movie_watchlist.infrastructure.config.dependencies import get_backend_forwarder
from movie_watchlist.infrastructure.config.settings import API_PROXY_PREFIX

router = APIRouter(prefix=API_PROXY_PREFIX, tags=["proxy"])

BackendForwarderDep = Annotated[BackendForwarder, Depends(get_backend_forwarder)]


@router.options("/{path:path}")
async def preflight(path: str) -> Response:
    return preflight_response()


@router.api_route("/{path:path}", methods=["GET", "POST", "PUT", "DELETE"])
async def proxy(path: str, request: Request, forwarder: BackendForwarderDep) -> Response:
    """Forward the request to the backend, keeping method, query string and body."""
    return await forwarder.forward(request)
