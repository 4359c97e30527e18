from movie_watchlist.applications.interfaces.dtos.movie import MovieForm
from movie_watchlist.domain.models.movie import Movie
from movie_watchlist.domain.ports.repositories.movie_repository import MovieRepository
from movie_watchlist.domain.ports.services.logger import LoggerPort


class CreateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, logger: LoggerPort):
        self.movie_repository = movie_repository
        self.logger = logger

    async def execute(self, form: MovieForm) -> Movie:
        draft = form.to_draft()

        try:
            created_movie = await self.movie_repository.create(draft)
        except Exception as e:
            self.logger.error("Error creating movie '%s': %s", draft.title, e)
            raise

        self.logger.info("Created movie %s '%s'", created_movie.id, created_movie.title)
        return created_movie
