"""Configuration management"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # TMDB (required - the proxy cannot serve without it)
    TMDB_READ_ACCESS_TOKEN: str = Field(..., min_length=1)
    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL: str = "https://image.tmdb.org/t/p/"
    TMDB_TIMEOUT: float = 30.0

    # Reverse geocoding for the location step
    GEOCODE_URL: str = "https://nominatim.openstreetmap.org/reverse"
    GEOCODE_USER_AGENT: str = "WatchNextTonight/1.0"
    DEFAULT_COUNTRY: str = "US"

    # Directories
    BASE_DIR: Path = Path(__file__).parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    LOGS_DIR: Path = DATA_DIR / "logs"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ALLOWED_ORIGINS: Optional[str] = None  # Comma-separated origins

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Ensure log directory exists
        self.LOGS_DIR.mkdir(exist_ok=True, parents=True)


# Global settings instance
settings = Settings()
