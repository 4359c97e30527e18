import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from movie_watchlist.applications.interfaces.dtos.message import Message
from movie_watchlist.infrastructure.config.dependencies import create_backend_client, get_settings
from movie_watchlist.infrastructure.logging.logger import setup_logging
from movie_watchlist.presentation.routers import proxy

setup_logging(get_settings().LOG_LEVEL)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("Movie watchlist proxy starting, backend=%s", settings.backend_origin)
    async with create_backend_client(settings) as backend_client:
        app.state.backend_client = backend_client
        yield
    logger.info("Movie watchlist proxy shutting down")


app = FastAPI(title="Movie Watchlist", lifespan=lifespan)

app.include_router(proxy.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Movie watchlist proxy"}


@app.get("/health", status_code=HTTPStatus.OK)
def health_check():
    return {"status": "healthy"}
