"""Unified genre schemas"""

from typing import List

from .media import CamelModel


class UnifiedGenre(CamelModel):
    """A genre spanning TMDB's separate movie and TV genre lists"""

    id: str
    name: str
    emoji: str
    movie_ids: List[int] = []
    tv_ids: List[int] = []


class UnifiedGenreList(CamelModel):
    """Unified genre list response"""

    genres: List[UnifiedGenre]
