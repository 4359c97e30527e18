from movie_watchlist.applications.interfaces.dtos.message import Message
from movie_watchlist.domain.ports.repositories.movie_repository import MovieRepository
from movie_watchlist.domain.ports.services.logger import LoggerPort


class DeleteMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, logger: LoggerPort):
        self.movie_repository = movie_repository
        self.logger = logger

    async def execute(self, movie_id: int) -> Message:
        try:
            await self.movie_repository.delete(movie_id)
        except Exception as e:
            self.logger.error("Error deleting movie %s: %s", movie_id, e)
            raise

        return Message(message=f"Movie {movie_id} deleted successfully")
