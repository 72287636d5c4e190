"""Media item schemas

Items are a tagged union on ``type``: movie-only and TV-only fields live on
their own model, so a TV item can never carry ``adult`` or ``runtime``.
Serialized field names are camelCase.
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MediaType(str, Enum):
    """Media type enumeration"""

    MOVIE = "movie"
    TV = "tv"


class CamelModel(BaseModel):
    """Base model serializing to camelCase keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MediaItemBase(CamelModel):
    """Fields shared by movies and TV shows"""

    id: str
    tmdb_id: int
    title: str
    overview: str = ""
    release_date: str = ""
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    rating: Optional[float] = None
    vote_count: Optional[int] = None
    popularity: Optional[float] = None
    genre_ids: List[int] = []
    original_language: str = ""


class MovieItem(MediaItemBase):
    """Normalized movie"""

    type: Literal[MediaType.MOVIE]
    adult: Optional[bool] = None
    runtime: Optional[int] = None


class TVItem(MediaItemBase):
    """Normalized TV show"""

    type: Literal[MediaType.TV]
    episode_run_time: Optional[List[int]] = None
    number_of_episodes: Optional[int] = None
    number_of_seasons: Optional[int] = None


MediaItem = Annotated[Union[MovieItem, TVItem], Field(discriminator="type")]


class SearchResults(CamelModel):
    """Page of normalized media items"""

    results: List[MediaItem]
    page: int = 1
    total_pages: int = 0
    total_results: int = 0


class Genre(BaseModel):
    """TMDB genre"""

    id: int
    name: str


class GenreList(BaseModel):
    """Genre list response"""

    genres: List[Genre] = []
