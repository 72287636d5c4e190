"""TMDB response normalization

Turns raw TMDB payloads (single movie, single TV show, or search / discover /
trending lists) into the application's media shapes. Pure functions: the
same payload always yields an equal result.
"""

import re
from typing import Any, Dict, List, Optional, Union

from ..config import settings
from ..schemas.media import (
    GenreList,
    MediaType,
    MovieItem,
    SearchResults,
    TVItem,
)

POSTER_SIZE = "w500"
BACKDROP_SIZE = "original"

NUMERIC_FIELDS = (
    ("vote_average", "rating"),
    ("vote_count", "vote_count"),
    ("popularity", "popularity"),
)

# Endpoints returning a list of one kind: discover/movie, search/tv,
# movie/popular, tv/123/similar, ...
_KIND_LIST_PATTERNS = (
    re.compile(r"^(?:discover|search)/(movie|tv)$"),
    re.compile(
        r"^(movie|tv)/(?:popular|top_rated|now_playing|upcoming|airing_today|on_the_air)$"
    ),
    re.compile(r"^(movie|tv)/\d+/(?:similar|recommendations)$"),
)
_MIXED_LIST_PATTERNS = (
    re.compile(r"^search/multi$"),
    re.compile(r"^trending/[a-z]+/[a-z]+$"),
)
_DETAIL_PATTERN = re.compile(r"^(movie|tv)/\d+$")
_GENRE_PATTERN = re.compile(r"^genre/(?:movie|tv)/list$")


def build_image_url(path: Optional[str], size: str) -> Optional[str]:
    """Full image URL, or None when TMDB has no image"""
    if not path:
        return None
    return f"{settings.TMDB_IMAGE_BASE_URL.rstrip('/')}/{size}{path}"


def _genre_ids(item: Dict[str, Any]) -> List[int]:
    # List endpoints send genre_ids, detail endpoints send genres objects
    if item.get("genre_ids") is not None:
        return list(item["genre_ids"])
    return [genre["id"] for genre in item.get("genres") or [] if "id" in genre]


def resolve_media_type(item: Dict[str, Any]) -> Optional[MediaType]:
    """
    Read the ``media_type`` discriminator of a mixed-list item.

    Missing or null means TV. Any other value (e.g. ``person``) returns None:
    the item is not a title.
    """
    value = item.get("media_type")
    if value is None:
        return MediaType.TV
    try:
        return MediaType(value)
    except ValueError:
        return None


def normalize_media_item(item: Dict[str, Any], media_type: MediaType) -> Union[MovieItem, TVItem]:
    """Normalize one TMDB title; ``media_type`` is trusted as given"""
    media_type = MediaType(media_type)
    tmdb_id = int(item["id"])

    fields = {
        "id": f"tmdb-{media_type.value}-{tmdb_id}",
        "tmdb_id": tmdb_id,
        "type": media_type,
        "overview": item.get("overview") or "",
        "poster_path": build_image_url(item.get("poster_path"), POSTER_SIZE),
        "backdrop_path": build_image_url(item.get("backdrop_path"), BACKDROP_SIZE),
        "genre_ids": _genre_ids(item),
        "original_language": item.get("original_language") or "",
    }

    # Passed through as-is, null included; absent keys stay unset
    for source, target in NUMERIC_FIELDS:
        if source in item:
            fields[target] = item[source]

    if media_type == MediaType.MOVIE:
        fields["title"] = item.get("title") or ""
        fields["release_date"] = item.get("release_date") or ""
        # Only copied when present; never synthesized
        for key in ("adult", "runtime"):
            if item.get(key) is not None:
                fields[key] = item[key]
        return MovieItem(**fields)

    fields["title"] = item.get("name") or ""
    fields["release_date"] = item.get("first_air_date") or ""
    for key in ("episode_run_time", "number_of_episodes", "number_of_seasons"):
        if item.get(key) is not None:
            fields[key] = item[key]
    return TVItem(**fields)


def normalize_results(data: Dict[str, Any], media_type: Optional[MediaType] = None) -> SearchResults:
    """
    Normalize a paged list response.

    With ``media_type`` every result is that kind. Without it, each result's
    own discriminator decides, and non-title results are dropped. Upstream
    order and paging numbers are kept as-is.
    """
    items: List[Union[MovieItem, TVItem]] = []
    for item in data.get("results") or []:
        item_type = media_type if media_type is not None else resolve_media_type(item)
        if item_type is None:
            continue
        items.append(normalize_media_item(item, item_type))

    return SearchResults(
        results=items,
        page=data.get("page") or 1,
        total_pages=data.get("total_pages") or 0,
        total_results=data.get("total_results") or 0,
    )


def normalize_genres(data: Dict[str, Any]) -> GenreList:
    """Keep only the genre list"""
    return GenreList(genres=data.get("genres") or [])


def transform_response(path: str, data: Any) -> Any:
    """
    Pick the transformation for an upstream resource path.

    Returns a pydantic model for recognized endpoints, ``data`` untouched
    otherwise (videos, watch providers, external ids, ...).
    """
    path = path.strip("/")
    if not isinstance(data, dict):
        return data

    for pattern in _MIXED_LIST_PATTERNS:
        if pattern.match(path):
            return normalize_results(data)

    for pattern in _KIND_LIST_PATTERNS:
        match = pattern.match(path)
        if match:
            return normalize_results(data, MediaType(match.group(1)))

    match = _DETAIL_PATTERN.match(path)
    if match:
        return normalize_media_item(data, MediaType(match.group(1)))

    if _GENRE_PATTERN.match(path):
        return normalize_genres(data)

    return data
