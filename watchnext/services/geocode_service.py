"""Reverse geocoding service"""

from typing import Optional

import httpx

from ..config import settings
from .log_service import log_service


class GeocodeError(Exception):
    """Reverse geocoding failed"""

    pass


class GeocodeService:
    """Coordinates to country code via Nominatim"""

    def __init__(
        self,
        url: str = "https://nominatim.openstreetmap.org/reverse",
        user_agent: str = "WatchNextTonight/1.0",
        default_country: str = "US",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.default_country = default_country
        # Nominatim's usage policy requires an identifying User-Agent
        self.client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
        )

    @classmethod
    def from_settings(cls, transport: Optional[httpx.AsyncBaseTransport] = None) -> "GeocodeService":
        """Build the service from application settings"""
        return cls(
            url=settings.GEOCODE_URL,
            user_agent=settings.GEOCODE_USER_AGENT,
            default_country=settings.DEFAULT_COUNTRY,
            transport=transport,
        )

    async def lookup_country(self, latitude: float, longitude: float) -> str:
        """Upper-case ISO country code for a coordinate pair"""
        params = {
            "format": "json",
            "lat": latitude,
            "lon": longitude,
            "zoom": 3,
            "addressdetails": 1,
        }

        try:
            response = await self.client.get(self.url, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise GeocodeError(f"Reverse geocoding failed: {e}") from e

        address = data.get("address") if isinstance(data, dict) else None
        country_code = (address or {}).get("country_code")
        if not country_code:
            raise GeocodeError("No country in geocoding response")
        return country_code.upper()

    async def get_country_code(self, latitude: float, longitude: float) -> str:
        """Country code, falling back to the default country on any failure"""
        try:
            return await self.lookup_country(latitude, longitude)
        except GeocodeError as e:
            log_service.error(f"{e}; using {self.default_country}")
            return self.default_country

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()
