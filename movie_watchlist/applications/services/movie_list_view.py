from typing import List, Optional

from movie_watchlist.applications.interfaces.dtos.movie import MovieQuery
from movie_watchlist.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from movie_watchlist.applications.use_cases.movie.get_movies import GetMoviesUseCase
from movie_watchlist.domain.exceptions import DomainError
from movie_watchlist.domain.models.movie import Movie
from movie_watchlist.domain.ports.repositories.movie_repository import MovieRepository
from movie_watchlist.domain.ports.services.logger import LoggerPort

LOAD_ERROR_MESSAGE = "Failed to load movies. Please try again."


class MovieListView:
    """State behind the watchlist page: current filters, loaded movies, loading and error flags.

    Every change of search, genre or sort re-fetches from the backend. Fetches may
    overlap; each one is stamped with a sequence number and only the response of
    the most recently issued fetch is applied, older ones are dropped.
    """

    def __init__(self, movie_repository: MovieRepository, logger: LoggerPort, query: Optional[MovieQuery] = None):
        self.movie_repository = movie_repository
        self.logger = logger
        self.query = query or MovieQuery.from_sort_choice("")
        self.movies: List[Movie] = []
        self.loading = False
        self.error: Optional[str] = None
        self._sequence = 0

    @property
    def sort_choice(self) -> str:
        return f"{self.query.sort_by}-{self.query.sort_order}"

    @property
    def empty_message(self) -> Optional[str]:
        if self.loading or self.movies:
            return None
        return "No movies found" if self.query.is_filtered else "No movies yet"

    async def refresh(self) -> bool:
        """Fetch the list for the current query. Returns False when the result was not applied."""
        self._sequence += 1
        stamp = self._sequence
        self.loading = True
        self.error = None

        try:
            result = await GetMoviesUseCase(self.movie_repository).execute(self.query)
        except DomainError as e:
            if stamp != self._sequence:
                self.logger.debug("Ignoring failure of superseded movie list request #%s: %s", stamp, e)
                return False
            self.logger.error("Error fetching movies: %s", e)
            self.error = LOAD_ERROR_MESSAGE
            self.loading = False
            return False

        if stamp != self._sequence:
            self.logger.debug("Discarding stale movie list response #%s (latest #%s)", stamp, self._sequence)
            return False

        self.movies = result.movies
        self.loading = False
        return True

    async def set_search(self, search: str) -> bool:
        self.query = self.query.model_copy(update={"search": search or None})
        return await self.refresh()

    async def set_genre(self, genre: str) -> bool:
        self.query = self.query.model_copy(update={"genre": genre or None})
        return await self.refresh()

    async def set_sort_choice(self, choice: str) -> bool:
        self.query = MovieQuery.from_sort_choice(choice, search=self.query.search, genre=self.query.genre)
        return await self.refresh()

    async def delete(self, movie: Movie) -> bool:
        """Delete a movie and reload the list. Delete failures propagate to the caller."""
        await DeleteMovieUseCase(self.movie_repository, self.logger).execute(movie.id)
        return await self.refresh()
