"""TMDB API service"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import httpx

from ..config import settings
from .log_service import log_service

QueryParams = Union[Dict[str, str], Sequence[Tuple[str, str]]]


class TMDBError(Exception):
    """Failed TMDB call

    ``status_code`` is the upstream HTTP status, or None when the request
    never got a response (DNS, connection reset, timeout, unreadable body).
    """

    def __init__(self, endpoint: str, status_code: Optional[int] = None):
        self.endpoint = endpoint
        self.status_code = status_code
        if status_code is None:
            message = f"TMDB request failed for {endpoint}"
        else:
            message = f"TMDB returned {status_code} for {endpoint}"
        super().__init__(message)


class TMDBService:
    """The Movie Database API integration

    One outbound call per method invocation. No retries: failures are raised
    as TMDBError and classified by the caller.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = "https://api.themoviedb.org/3",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Content-Type": "application/json;charset=utf-8",
                "Accept": "application/json",
            },
        )

    @classmethod
    def from_settings(cls, transport: Optional[httpx.AsyncBaseTransport] = None) -> "TMDBService":
        """Build the service from application settings"""
        return cls(
            access_token=settings.TMDB_READ_ACCESS_TOKEN,
            base_url=settings.TMDB_BASE_URL,
            timeout=settings.TMDB_TIMEOUT,
            transport=transport,
        )

    def build_url(self, endpoint: str) -> str:
        """Full upstream URL for a resource path"""
        return f"{self.base_url}/{endpoint.strip('/')}"

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[QueryParams] = None,
        json: Any = None,
    ) -> Any:
        """Make request to TMDB API"""
        url = self.build_url(endpoint)

        try:
            response = await self.client.request(method, url, params=params, json=json)
        except httpx.HTTPError as e:
            log_service.error(f"TMDB API unreachable ({method} {endpoint}): {e!r}")
            raise TMDBError(endpoint) from e

        log_service.upstream(f"{method} {endpoint} -> {response.status_code}")

        if not response.is_success:
            # Body is logged, never forwarded
            log_service.error(
                f"TMDB API error {response.status_code} for {endpoint}: {response.text[:500]}"
            )
            raise TMDBError(endpoint, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            log_service.error(f"TMDB API returned invalid JSON for {endpoint}: {e}")
            raise TMDBError(endpoint) from e

    async def fetch(self, endpoint: str, params: Optional[QueryParams] = None) -> Any:
        """GET a TMDB resource and return the parsed JSON body"""
        return await self._request("GET", endpoint, params=params)

    async def post(self, endpoint: str, body: Any = None) -> Any:
        """POST a JSON body to a TMDB resource"""
        return await self._request("POST", endpoint, json=body)

    async def get_genres(self, media_type: str) -> List[Dict]:
        """Get the genre list for 'movie' or 'tv'"""
        data = await self.fetch(f"genre/{media_type}/list")
        return data.get("genres", [])

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()
