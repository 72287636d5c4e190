"""Services layer"""

from .error_classifier import RouteDecision, classify
from .geocode_service import GeocodeError, GeocodeService
from .log_service import LogService
from .tmdb_service import TMDBError, TMDBService

__all__ = [
    "LogService",
    "TMDBService",
    "TMDBError",
    "GeocodeService",
    "GeocodeError",
    "RouteDecision",
    "classify",
]
