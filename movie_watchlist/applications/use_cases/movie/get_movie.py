from movie_watchlist.domain.models.movie import Movie
from movie_watchlist.domain.ports.repositories.movie_repository import MovieRepository


class GetMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int) -> Movie:
        return await self.movie_repository.get_by_id(movie_id)
