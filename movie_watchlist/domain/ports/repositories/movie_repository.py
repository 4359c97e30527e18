from abc import ABC, abstractmethod
from typing import List, Optional

from movie_watchlist.domain.models.movie import Movie, MovieDraft


class MovieRepository(ABC):
    @abstractmethod
    async def list(
        self,
        search: Optional[str] = None,
        genre: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> List[Movie]:
        pass

    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Movie:
        pass

    @abstractmethod
    async def create(self, draft: MovieDraft) -> Movie:
        pass

    @abstractmethod
    async def update(self, movie_id: int, draft: MovieDraft) -> Movie:
        pass

    @abstractmethod
    async def delete(self, movie_id: int) -> None:
        pass
