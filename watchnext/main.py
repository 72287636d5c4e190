"""Main FastAPI application"""

import asyncio
from contextlib import asynccontextmanager
from typing import List, Tuple

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import geocode, genres, tmdb
from .config import settings
from .services.geocode_service import GeocodeService
from .services.log_service import log_service
from .services.tmdb_service import TMDBService

APP_VERSION = "1.0.0"


def cors_settings(config) -> Tuple[List[str], bool]:
    """Allowed origins and whether credentials are allowed"""
    # If ALLOWED_ORIGINS is not set, default to ["*"] for maximum compatibility
    if not config.ALLOWED_ORIGINS:
        return ["*"], False  # Credentials cannot be used with "*"
    origins = [origin.strip() for origin in config.ALLOWED_ORIGINS.split(",") if origin.strip()]
    return origins, True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup - one upstream client per process, credential read once
    app.state.tmdb = TMDBService.from_settings()
    app.state.geocoder = GeocodeService.from_settings()
    log_service.info(f"Watch Next Tonight {APP_VERSION} started, proxying {settings.TMDB_BASE_URL}")
    try:
        yield
    except asyncio.CancelledError:
        pass  # Suppress CancelledError during shutdown
    finally:
        await app.state.tmdb.close()
        await app.state.geocoder.close()


app = FastAPI(
    title="Watch Next Tonight",
    description="Movie and TV recommendations by location, genre and recency",
    version=APP_VERSION,
    lifespan=lifespan,
)

# Add CORS middleware
allowed_origins, allow_credentials = cors_settings(settings)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(tmdb.router)
app.include_router(genres.router)
app.include_router(geocode.router)


# Root API endpoint
@app.get("/api")
async def api_root():
    """API root"""
    return {
        "name": "Watch Next Tonight API",
        "version": APP_VERSION,
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {"status": "healthy", "service": "watch-next-tonight"}
