"""Geocode routes"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..schemas.geocode import GeocodeRequest, GeocodeResponse
from ..services.geocode_service import GeocodeService

router = APIRouter(prefix="/api/geocode", tags=["geocode"])

_TYPE_ERRORS = {"missing", "float_type", "float_parsing", "finite_number"}
_BOUNDS = {"latitude": 90, "longitude": 180}


def get_geocode_service(request: Request) -> GeocodeService:
    """Geocode service created at startup"""
    return request.app.state.geocoder


def validation_message(error: ValidationError) -> str:
    """Client-facing message for the first invalid coordinate"""
    first = error.errors()[0]
    field = str(first["loc"][0]) if first.get("loc") else "coordinates"
    if field not in _BOUNDS:
        return "Invalid coordinates"
    if first["type"] in _TYPE_ERRORS:
        return f"Invalid {field}: must be a number"
    bound = _BOUNDS[field]
    return f"Invalid {field}: must be between -{bound} and {bound}"


@router.post("")
async def reverse_geocode(
    request: Request,
    geocoder: GeocodeService = Depends(get_geocode_service),
):
    """
    Country code for the caller's coordinates.

    The lookup runs server-side; coordinates are not stored or echoed back.
    """
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse(content={"error": "Invalid JSON in request body"}, status_code=400)

    if not isinstance(body, dict):
        return JSONResponse(content={"error": "Invalid coordinates"}, status_code=400)

    try:
        coordinates = GeocodeRequest(**body)
    except ValidationError as e:
        return JSONResponse(content={"error": validation_message(e)}, status_code=400)

    country_code = await geocoder.get_country_code(coordinates.latitude, coordinates.longitude)
    return GeocodeResponse(country_code=country_code).model_dump(by_alias=True)


@router.api_route("", methods=["GET", "PUT", "DELETE", "PATCH"], include_in_schema=False)
async def method_not_allowed():
    """Only POST is supported"""
    return JSONResponse(content={"error": "Method not allowed"}, status_code=405)
