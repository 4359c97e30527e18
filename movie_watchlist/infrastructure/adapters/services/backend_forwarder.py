from http import HTTPStatus
from typing import Dict, Optional

import httpx
from fastapi import Request, Response
from fastapi.responses import JSONResponse

from movie_watchlist.domain.ports.services.logger import LoggerPort
from movie_watchlist.infrastructure.config.settings import API_PROXY_PREFIX

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

JSON_CONTENT_TYPE = "application/json"


class BackendForwarder:
    """Relays a proxied request to the backend and reflects its answer."""

    def __init__(
        self,
        backend_origin: str,
        client: httpx.AsyncClient,
        logger: LoggerPort,
        prefix: str = API_PROXY_PREFIX,
    ):
        self.backend_origin = backend_origin.rstrip("/")
        self.client = client
        self.logger = logger
        self.prefix = prefix.rstrip("/") + "/"

    def build_url(self, path: str, query: str = "") -> str:
        target_url = f"{self.backend_origin}/{path.lstrip('/')}"
        if query:
            target_url += f"?{query}"
        return target_url

    def backend_path(self, request: Request) -> str:
        """Path below the proxy prefix, percent-escapes kept as the caller sent them."""
        raw_path = request.scope.get("raw_path")
        path = raw_path.decode("latin-1").split("?", 1)[0] if raw_path else request.url.path
        if path.startswith(self.prefix):
            return path[len(self.prefix):]
        return path.lstrip("/")

    async def forward(self, request: Request) -> Response:
        target_url = self.build_url(self.backend_path(request), request.url.query)

        headers = {"Content-Type": JSON_CONTENT_TYPE}
        authorization: Optional[str] = request.headers.get("authorization")
        if authorization is not None:
            headers["Authorization"] = authorization

        # GET never carries a body, even if the caller sent one.
        content = None
        if request.method != "GET":
            content = await request.body()

        self.logger.info("Proxying %s to %s", request.method, target_url)

        try:
            upstream = await self.client.request(
                method=request.method,
                url=target_url,
                headers=headers,
                content=content,
            )
        except httpx.RequestError as exc:
            self.logger.error("Proxy error for %s %s: %s", request.method, target_url, exc)
            return JSONResponse(
                {
                    "error": "Failed to proxy request to backend",
                    "message": str(exc) or exc.__class__.__name__,
                },
                status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                headers=CORS_HEADERS,
            )

        return Response(
            content=upstream.content,
            status_code=upstream.status_code,
            headers=CORS_HEADERS,
            media_type=JSON_CONTENT_TYPE,
        )


def preflight_response() -> Response:
    return Response(status_code=HTTPStatus.OK, headers=CORS_HEADERS)
