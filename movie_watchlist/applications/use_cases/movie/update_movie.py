from movie_watchlist.applications.interfaces.dtos.movie import MovieForm
from movie_watchlist.domain.models.movie import Movie
from movie_watchlist.domain.ports.repositories.movie_repository import MovieRepository
from movie_watchlist.domain.ports.services.logger import LoggerPort


class UpdateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, logger: LoggerPort):
        self.movie_repository = movie_repository
        self.logger = logger

    async def execute(self, movie_id: int, form: MovieForm) -> Movie:
        draft = form.to_draft()

        try:
            updated_movie = await self.movie_repository.update(movie_id, draft)
        except Exception as e:
            self.logger.error("Error updating movie %s: %s", movie_id, e)
            raise

        self.logger.info("Updated movie %s", updated_movie.id)
        return updated_movie
