"""Unified genre routes"""

import asyncio

from fastapi import APIRouter, Depends

from ..schemas.genres import UnifiedGenreList
from ..services.genres import get_unified_genres
from ..services.tmdb_service import TMDBError, TMDBService
from .tmdb import failure_response, get_tmdb_service, render

router = APIRouter(prefix="/api/genres", tags=["genres"])


@router.get("")
async def unified_genres(tmdb: TMDBService = Depends(get_tmdb_service)):
    """Unified genres available in TMDB's current movie and TV genre lists"""
    # Both lists are awaited to completion; the movie list's failure wins
    results = await asyncio.gather(
        tmdb.get_genres("movie"), tmdb.get_genres("tv"), return_exceptions=True
    )
    for result in results:
        if isinstance(result, TMDBError):
            return failure_response(result.endpoint, result)
        if isinstance(result, BaseException):
            raise result

    movie_genres, tv_genres = results

    genres = get_unified_genres(movie_genres, tv_genres)
    return render(UnifiedGenreList(genres=genres))
