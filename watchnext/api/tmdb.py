"""TMDB proxy routes

``/api/tmdb/{path}`` forwards to ``https://api.themoviedb.org/3/{path}`` with
the server's credential, then reshapes the answer into the app's media
model. Upstream failures are classified into a fixed set of responses.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..schemas.media import MediaType, SearchResults
from ..services.discover_filters import build_upstream_params, parse_genre_selection
from ..services.error_classifier import RouteDecision, classify
from ..services.genres import matches_unified_genres
from ..services.log_service import log_service
from ..services.normalizer import transform_response
from ..services.tmdb_service import TMDBError, TMDBService

router = APIRouter(prefix="/api/tmdb", tags=["tmdb"])


def get_tmdb_service(request: Request) -> TMDBService:
    """TMDB service created at startup"""
    return request.app.state.tmdb


def render(payload: Any, status_code: int = 200) -> JSONResponse:
    """Serialize a model (camelCase, unset optionals omitted) or raw JSON"""
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return JSONResponse(content=payload, status_code=status_code)


def render_failure(decision: RouteDecision) -> JSONResponse:
    """Response for a non-success decision"""
    return JSONResponse(content=decision.body, status_code=decision.status_code)


def failure_response(resource_path: str, error: TMDBError) -> JSONResponse:
    """Classify and log an upstream failure"""
    decision = classify(resource_path, error.status_code)
    log_service.info(f"TMDB {resource_path}: {decision.outcome.value} ({decision.status_code})")
    return render_failure(decision)


def invalid_path_response(resource_path: str):
    """400 for an empty or traversing resource path, None when usable"""
    segments = resource_path.split("/")
    if not resource_path or any(segment in ("", ".", "..") for segment in segments):
        return JSONResponse(content={"error": "Invalid TMDB resource path"}, status_code=400)
    return None


def filter_by_genres(results: SearchResults, genres: str) -> SearchResults:
    """Drop mixed-list items outside the selected unified genres"""
    selected = parse_genre_selection(genres)
    kept = [
        item
        for item in results.results
        if matches_unified_genres(item.genre_ids, selected, MediaType(item.type))
    ]
    return results.model_copy(update={"results": kept})


@router.get("/{path:path}")
async def proxy_get(
    path: str,
    request: Request,
    tmdb: TMDBService = Depends(get_tmdb_service),
):
    """Proxy a GET to TMDB and normalize the result"""
    resource_path = path.strip("/")
    invalid = invalid_path_response(resource_path)
    if invalid is not None:
        return invalid

    params = build_upstream_params(resource_path, request.query_params.multi_items())

    try:
        data = await tmdb.fetch(resource_path, params)
    except TMDBError as e:
        return failure_response(resource_path, e)

    payload = transform_response(resource_path, data)

    # Trending has no genre filter upstream; apply the selection here
    genres = request.query_params.get("genres")
    if genres and resource_path.startswith("trending/") and isinstance(payload, SearchResults):
        payload = filter_by_genres(payload, genres)

    return render(payload)


@router.post("/{path:path}")
async def proxy_post(
    path: str,
    request: Request,
    tmdb: TMDBService = Depends(get_tmdb_service),
):
    """Proxy a POST to TMDB; the response is returned untransformed"""
    resource_path = path.strip("/")
    invalid = invalid_path_response(resource_path)
    if invalid is not None:
        return invalid

    try:
        body = await request.json()
    except ValueError:
        return JSONResponse(content={"error": "Invalid JSON in request body"}, status_code=400)

    try:
        data = await tmdb.post(resource_path, body)
    except TMDBError as e:
        return failure_response(resource_path, e)

    return render(data)
