"""Streaming provider registry

Maps the platform keys used by the UI (``netflix``, ``prime``, ...) to TMDB
watch-provider IDs. TMDB's ``with_watch_providers`` filter reads a
pipe-separated list as "any of", so platforms with several historical IDs
are joined with ``|``.
"""

from types import MappingProxyType
from typing import Mapping

# Subscription (flatrate) and free streaming providers, declaration order matters
STREAMING_PROVIDER_IDS: Mapping[str, int] = MappingProxyType(
    {
        "NETFLIX": 8,
        "AMAZON_PRIME": 9,
        "AMAZON_PRIME_VIDEO": 119,  # Alternative ID for Prime Video
        "DISNEY_PLUS": 337,
        "HULU": 15,
        "HBO_MAX": 384,  # Pre-rebrand
        "MAX": 1899,
        "PARAMOUNT_PLUS": 531,
        "APPLE_TV_PLUS": 350,
        "PEACOCK": 386,
        "CRUNCHYROLL": 283,
        "SHOWTIME": 37,
        "STARZ": 43,
        "EPIX": 34,
        "YOUTUBE_PREMIUM": 188,
        "FUBO_TV": 257,
        # Free streaming services
        "TUBI": 273,
        "PLUTO_TV": 300,
        "CRACKLE": 12,
        "VUDU_FREE": 332,
    }
)

PROVIDER_NAMES: Mapping[int, str] = MappingProxyType(
    {
        STREAMING_PROVIDER_IDS["NETFLIX"]: "Netflix",
        STREAMING_PROVIDER_IDS["AMAZON_PRIME"]: "Amazon Prime Video",
        STREAMING_PROVIDER_IDS["AMAZON_PRIME_VIDEO"]: "Prime Video",
        STREAMING_PROVIDER_IDS["DISNEY_PLUS"]: "Disney Plus",
        STREAMING_PROVIDER_IDS["HULU"]: "Hulu",
        STREAMING_PROVIDER_IDS["HBO_MAX"]: "HBO Max",
        STREAMING_PROVIDER_IDS["MAX"]: "Max",
        STREAMING_PROVIDER_IDS["PARAMOUNT_PLUS"]: "Paramount Plus",
        STREAMING_PROVIDER_IDS["APPLE_TV_PLUS"]: "Apple TV Plus",
        STREAMING_PROVIDER_IDS["PEACOCK"]: "Peacock",
        STREAMING_PROVIDER_IDS["CRUNCHYROLL"]: "Crunchyroll",
        STREAMING_PROVIDER_IDS["SHOWTIME"]: "Showtime",
        STREAMING_PROVIDER_IDS["STARZ"]: "Starz",
        STREAMING_PROVIDER_IDS["EPIX"]: "Epix",
        STREAMING_PROVIDER_IDS["YOUTUBE_PREMIUM"]: "YouTube Premium",
        STREAMING_PROVIDER_IDS["FUBO_TV"]: "FuboTV",
        STREAMING_PROVIDER_IDS["TUBI"]: "Tubi",
        STREAMING_PROVIDER_IDS["PLUTO_TV"]: "Pluto TV",
        STREAMING_PROVIDER_IDS["CRACKLE"]: "Crackle",
        STREAMING_PROVIDER_IDS["VUDU_FREE"]: "Vudu (Free)",
    }
)

# UI platform key -> provider keys
PLATFORM_PROVIDERS: Mapping[str, tuple] = MappingProxyType(
    {
        "netflix": ("NETFLIX",),
        "prime": ("AMAZON_PRIME", "AMAZON_PRIME_VIDEO"),
        "disney": ("DISNEY_PLUS",),
        "appletv": ("APPLE_TV_PLUS",),
        "max": ("HBO_MAX", "MAX"),
    }
)

PROVIDER_ID_SEPARATOR = "|"


def get_streaming_provider_ids() -> str:
    """All known provider IDs, pipe-joined in declaration order"""
    return PROVIDER_ID_SEPARATOR.join(
        str(provider_id) for provider_id in STREAMING_PROVIDER_IDS.values()
    )


def get_provider_ids_for_platform(platform: str) -> str:
    """
    Resolve a UI platform key to a TMDB ``with_watch_providers`` value.

    Case-insensitive. ``"all"`` and unknown keys return every provider ID.
    """
    keys = PLATFORM_PROVIDERS.get((platform or "").strip().lower())
    if keys is None:
        return get_streaming_provider_ids()
    return PROVIDER_ID_SEPARATOR.join(str(STREAMING_PROVIDER_IDS[key]) for key in keys)


def get_provider_name(provider_id: int) -> str:
    """Display name for a provider ID, empty string when unknown"""
    return PROVIDER_NAMES.get(provider_id, "")
