"""Preference query translation

The UI speaks in preferences (``platform``, ``genres``, ``recency``); TMDB's
discover endpoints speak in provider IDs, genre IDs and date ranges. These
app-level parameters never reach TMDB as-is.
"""

import calendar
import re
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from ..schemas.media import MediaType
from .genres import unified_genres_to_tmdb_ids
from .providers import get_provider_ids_for_platform

PREFERENCE_PARAMS = ("platform", "genres", "recency")

MONETIZATION_TYPES = "flatrate|rent|buy"

# Recency option -> months back from today
RECENCY_MONTHS = {
    "brand-new": 1,
    "very-recent": 3,
    "recent": 6,
    "contemporary": 24,
}
EARLIEST_YEAR = 1900

_DISCOVER_PATTERN = re.compile(r"^discover/(movie|tv)$")

DATE_PARAMS = {
    MediaType.MOVIE: ("primary_release_date.gte", "primary_release_date.lte"),
    MediaType.TV: ("first_air_date.gte", "first_air_date.lte"),
}


def months_ago(today: date, months: int) -> date:
    """Same day ``months`` earlier, clamped to the end of shorter months"""
    month_index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def earliest_date(today: date) -> date:
    """Today's month and day in 1900; Feb 29 becomes Feb 28"""
    day = min(today.day, calendar.monthrange(EARLIEST_YEAR, today.month)[1])
    return date(EARLIEST_YEAR, today.month, day)


def recency_date_range(recency: Optional[str], today: Optional[date] = None) -> Tuple[str, str]:
    """ISO (gte, lte) dates for a recency option; unknown options reach back to 1900"""
    today = today or date.today()
    months = RECENCY_MONTHS.get((recency or "").strip().lower())
    start = months_ago(today, months) if months else earliest_date(today)
    return start.isoformat(), today.isoformat()


def parse_genre_selection(value: Optional[str]) -> List[str]:
    """Split a comma-separated unified genre selection"""
    if not value:
        return []
    return [part.strip().lower() for part in value.split(",") if part.strip()]


def discover_media_type(resource_path: str) -> Optional[MediaType]:
    """Kind of a discover endpoint, None for any other path"""
    match = _DISCOVER_PATTERN.match(resource_path.strip("/"))
    return MediaType(match.group(1)) if match else None


def split_preferences(
    params: Sequence[Tuple[str, str]],
) -> Tuple[Dict[str, str], List[Tuple[str, str]]]:
    """Separate app-level preference parameters from upstream ones"""
    preferences: Dict[str, str] = {}
    upstream: List[Tuple[str, str]] = []
    for key, value in params:
        if key in PREFERENCE_PARAMS:
            preferences[key] = value
        else:
            upstream.append((key, value))
    return preferences, upstream


def build_upstream_params(
    resource_path: str,
    params: Sequence[Tuple[str, str]],
    today: Optional[date] = None,
) -> List[Tuple[str, str]]:
    """
    Query to forward to TMDB for ``resource_path``.

    Preference parameters are always stripped. On discover endpoints they are
    translated into TMDB filters; anything the caller already set explicitly
    is left alone.
    """
    preferences, upstream = split_preferences(params)
    media_type = discover_media_type(resource_path)
    if media_type is None:
        return upstream

    present = {key for key, _ in upstream}
    translated: List[Tuple[str, str]] = []

    if "platform" in preferences:
        translated.append(
            ("with_watch_providers", get_provider_ids_for_platform(preferences["platform"]))
        )
        translated.append(("with_watch_monetization_types", MONETIZATION_TYPES))

    genre_ids = unified_genres_to_tmdb_ids(
        parse_genre_selection(preferences.get("genres")), media_type
    )
    if genre_ids:
        translated.append(("with_genres", "|".join(str(i) for i in genre_ids)))

    if "recency" in preferences:
        gte, lte = recency_date_range(preferences["recency"], today)
        gte_key, lte_key = DATE_PARAMS[media_type]
        translated.extend([(gte_key, gte), (lte_key, lte)])

    return upstream + [(key, value) for key, value in translated if key not in present]
