from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

GENRES = (
    "Action",
    "Comedy",
    "Drama",
    "Horror",
    "Romance",
    "Sci-Fi",
    "Thriller",
    "Animation",
    "Documentary",
    "Fantasy",
)

TITLE_MAX_LENGTH = 200
POSTER_IMAGE_MAX_LENGTH = 500


class Movie(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(gt=0)
    title: str
    genre: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    poster_image: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class MovieDraft(BaseModel):
    """Editable subset of a movie sent on create and update."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    genre: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    poster_image: Optional[str] = Field(default=None, max_length=POSTER_IMAGE_MAX_LENGTH)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("genre", "poster_image", mode="before")
    @classmethod
    def blank_as_absent(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
