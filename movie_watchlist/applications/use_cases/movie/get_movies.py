from movie_watchlist.applications.interfaces.dtos.movie import MovieList, MovieQuery
from movie_watchlist.domain.ports.repositories.movie_repository import MovieRepository


class GetMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, query: MovieQuery) -> MovieList:
        movies = await self.movie_repository.list(
            search=query.search,
            genre=query.genre,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
        )
        return MovieList(movies=movies)
