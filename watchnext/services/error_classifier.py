"""Upstream failure classification

Maps a TMDB outcome (status code, or no status for transport failures) to
the small set of responses the client ever sees. Upstream error bodies are
never part of a decision.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

# Auxiliary resources where 404 just means "nothing to show"
EMPTY_ON_NOT_FOUND = ("videos", "watch/providers")

RATE_LIMITED_MESSAGE = "Too many requests to TMDB. Please try again later."
UNAVAILABLE_MESSAGE = "TMDB service is temporarily unavailable"
UPSTREAM_ERROR_MESSAGE = "TMDB API error"

_RESOURCE_ID_PATTERN = re.compile(r"^(?:movie|tv)/(\d+)/")


class Outcome(str, Enum):
    """Kinds of route decision"""

    SUCCESS = "success"
    EMPTY_RESULT = "empty_result"
    RATE_LIMITED = "rate_limited"
    SERVICE_UNAVAILABLE = "service_unavailable"
    UPSTREAM_ERROR = "upstream_error"


@dataclass(frozen=True)
class RouteDecision:
    """What the route should answer"""

    outcome: Outcome
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.outcome == Outcome.SUCCESS


def is_empty_on_not_found(resource_path: str) -> bool:
    """True for auxiliary resources where TMDB 404s routinely"""
    path = resource_path.strip("/")
    return any(path == suffix or path.endswith(f"/{suffix}") for suffix in EMPTY_ON_NOT_FOUND)


def empty_result_body(resource_path: str) -> Dict[str, Any]:
    """Synthetic success body for an allow-listed 404"""
    body: Dict[str, Any] = {"results": []}
    match = _RESOURCE_ID_PATTERN.match(resource_path.strip("/"))
    if match:
        body = {"id": int(match.group(1)), "results": []}
    return body


def classify(resource_path: str, status_code: Optional[int]) -> RouteDecision:
    """
    Classify an upstream outcome for ``resource_path``.

    - 2xx: success, caller normalizes the body
    - 404 on videos / watch providers: empty result with 200
    - 429: passed through
    - 5xx, unexpected 1xx/3xx, or no status at all: collapsed to 503
    - any other 4xx: passed through with a generic message
    """
    if status_code is not None and 200 <= status_code < 300:
        return RouteDecision(Outcome.SUCCESS, status_code)

    if status_code == 404 and is_empty_on_not_found(resource_path):
        return RouteDecision(Outcome.EMPTY_RESULT, 200, empty_result_body(resource_path))

    if status_code == 429:
        return RouteDecision(Outcome.RATE_LIMITED, 429, {"error": RATE_LIMITED_MESSAGE})

    if status_code is None or status_code >= 500 or status_code < 400:
        return RouteDecision(Outcome.SERVICE_UNAVAILABLE, 503, {"error": UNAVAILABLE_MESSAGE})

    return RouteDecision(Outcome.UPSTREAM_ERROR, status_code, {"error": UPSTREAM_ERROR_MESSAGE})
