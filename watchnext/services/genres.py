"""Unified genres

TMDB keeps separate genre lists for movies and TV ("Action" vs "Action &
Adventure", ...). The genre step offers one list; these helpers translate a
selection back to TMDB IDs for each kind.
"""

from typing import Dict, Iterable, List

from ..schemas.genres import UnifiedGenre
from ..schemas.media import MediaType

UNIFIED_GENRES: tuple = (
    UnifiedGenre(id="action", name="Action", emoji="🎬", movie_ids=[28], tv_ids=[10759]),
    UnifiedGenre(id="adventure", name="Adventure", emoji="🗺️", movie_ids=[12], tv_ids=[10759]),
    UnifiedGenre(id="animation", name="Animation", emoji="🎨", movie_ids=[16], tv_ids=[16]),
    UnifiedGenre(id="comedy", name="Comedy", emoji="😂", movie_ids=[35], tv_ids=[35]),
    UnifiedGenre(id="crime", name="Crime", emoji="🕵️", movie_ids=[80], tv_ids=[80]),
    UnifiedGenre(id="documentary", name="Documentary", emoji="📹", movie_ids=[99], tv_ids=[99]),
    UnifiedGenre(id="drama", name="Drama", emoji="🎭", movie_ids=[18], tv_ids=[18]),
    UnifiedGenre(id="family", name="Family", emoji="👨‍👩‍👧‍👦", movie_ids=[10751], tv_ids=[10751]),
    UnifiedGenre(id="fantasy", name="Fantasy", emoji="🧙‍♂️", movie_ids=[14], tv_ids=[10765]),
    UnifiedGenre(id="horror", name="Horror", emoji="👻", movie_ids=[27], tv_ids=[]),
    UnifiedGenre(id="mystery", name="Mystery", emoji="🔍", movie_ids=[9648], tv_ids=[9648]),
    UnifiedGenre(id="romance", name="Romance", emoji="💕", movie_ids=[10749], tv_ids=[]),
    UnifiedGenre(id="sci-fi", name="Sci-Fi", emoji="🚀", movie_ids=[878], tv_ids=[10765]),
    UnifiedGenre(id="thriller", name="Thriller", emoji="🔪", movie_ids=[53], tv_ids=[]),
    UnifiedGenre(id="war", name="War", emoji="⚔️", movie_ids=[10752], tv_ids=[10768]),
    UnifiedGenre(id="western", name="Western", emoji="🤠", movie_ids=[37], tv_ids=[37]),
    UnifiedGenre(id="music", name="Music", emoji="🎵", movie_ids=[10402], tv_ids=[]),
    UnifiedGenre(id="history", name="History", emoji="📜", movie_ids=[36], tv_ids=[]),
    UnifiedGenre(id="reality", name="Reality", emoji="📺", movie_ids=[], tv_ids=[10764]),
    UnifiedGenre(id="kids", name="Kids", emoji="👶", movie_ids=[], tv_ids=[10762]),
)

_BY_ID: Dict[str, UnifiedGenre] = {genre.id: genre for genre in UNIFIED_GENRES}


def get_unified_genres(movie_genres: Iterable[Dict], tv_genres: Iterable[Dict]) -> List[UnifiedGenre]:
    """Unified genres with at least one ID present in TMDB's current lists"""
    movie_ids = {genre.get("id") for genre in movie_genres}
    tv_ids = {genre.get("id") for genre in tv_genres}

    return [
        genre
        for genre in UNIFIED_GENRES
        if any(i in movie_ids for i in genre.movie_ids) or any(i in tv_ids for i in genre.tv_ids)
    ]


def unified_genres_to_tmdb_ids(unified_ids: Iterable[str], media_type: MediaType) -> List[int]:
    """TMDB genre IDs for a selection, deduplicated, first-seen order"""
    media_type = MediaType(media_type)
    tmdb_ids: List[int] = []

    for unified_id in unified_ids:
        genre = _BY_ID.get(unified_id)
        if genre is None:
            continue
        ids = genre.movie_ids if media_type == MediaType.MOVIE else genre.tv_ids
        for tmdb_id in ids:
            if tmdb_id not in tmdb_ids:
                tmdb_ids.append(tmdb_id)

    return tmdb_ids


def matches_unified_genres(
    item_genre_ids: Iterable[int], selected: List[str], media_type: MediaType
) -> bool:
    """Whether an item belongs to any selected genre; no selection matches all"""
    if not selected:
        return True
    required = unified_genres_to_tmdb_ids(selected, media_type)
    item_ids = set(item_genre_ids)
    return any(tmdb_id in item_ids for tmdb_id in required)
