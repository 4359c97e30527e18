from typing import List, Optional

import pydantic
from pydantic import BaseModel

from movie_watchlist.domain.exceptions import ValidationError
from movie_watchlist.domain.models.movie import GENRES, Movie, MovieDraft

DEFAULT_SORT_BY = "title"
DEFAULT_SORT_ORDER = "asc"

SORT_CHOICES = {
    "title-asc": ("title", "asc"),
    "title-desc": ("title", "desc"),
    "rating-asc": ("rating", "asc"),
    "rating-desc": ("rating", "desc"),
}


class MovieForm(BaseModel):
    """Create/edit form state. Unset text fields are empty strings."""

    title: str = ""
    genre: str = ""
    rating: Optional[int] = None
    poster_image: str = ""

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieForm":
        return cls(
            title=movie.title,
            genre=movie.genre or "",
            rating=movie.rating or None,
            poster_image=movie.poster_image or "",
        )

    def to_draft(self) -> MovieDraft:
        genre = self.genre.strip()
        if genre and genre not in GENRES:
            raise ValidationError(f"Unknown genre '{genre}'")

        try:
            return MovieDraft(
                title=self.title,
                genre=genre or None,
                rating=self.rating or None,
                poster_image=self.poster_image.strip() or None,
            )
        except pydantic.ValidationError as e:
            raise ValidationError(str(e)) from e


class MovieQuery(BaseModel):
    search: Optional[str] = None
    genre: Optional[str] = None
    sort_by: Optional[str] = None
    sort_order: Optional[str] = None

    @classmethod
    def from_sort_choice(cls, choice: str, search: Optional[str] = None, genre: Optional[str] = None) -> "MovieQuery":
        if not choice:
            sort_by, sort_order = DEFAULT_SORT_BY, DEFAULT_SORT_ORDER
        elif choice in SORT_CHOICES:
            sort_by, sort_order = SORT_CHOICES[choice]
        else:
            raise ValidationError(f"Unknown sort option '{choice}'")
        return cls(search=search, genre=genre, sort_by=sort_by, sort_order=sort_order)

    @property
    def is_filtered(self) -> bool:
        return bool(self.search or self.genre)


class MovieList(BaseModel):
    movies: List[Movie]
