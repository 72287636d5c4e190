"""Pydantic schemas for validation"""

from .geocode import GeocodeRequest, GeocodeResponse
from .genres import UnifiedGenre, UnifiedGenreList
from .media import (
    Genre,
    GenreList,
    MediaItem,
    MediaType,
    MovieItem,
    SearchResults,
    TVItem,
)

__all__ = [
    "MediaType",
    "MediaItem",
    "MovieItem",
    "TVItem",
    "SearchResults",
    "Genre",
    "GenreList",
    "UnifiedGenre",
    "UnifiedGenreList",
    "GeocodeRequest",
    "GeocodeResponse",
]
