"""Geocode schemas"""

from pydantic import BaseModel, Field

from .media import CamelModel


class GeocodeRequest(BaseModel):
    """Coordinates from the browser geolocation API"""

    latitude: float = Field(..., ge=-90, le=90, strict=True, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180, le=180, strict=True, allow_inf_nan=False)


class GeocodeResponse(CamelModel):
    """Only the country leaves the server, never the coordinates"""

    country_code: str
