"""Logging service"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..config import settings


class LogService:
    """Centralized logging service"""

    def __init__(self, log_dir: Path = None, level: str = None):
        self.log_dir = log_dir or settings.LOGS_DIR
        self.log_dir.mkdir(exist_ok=True, parents=True)
        info_level = logging.getLevelName((level or settings.LOG_LEVEL).upper())
        if not isinstance(info_level, int):
            info_level = logging.INFO

        # Setup loggers
        self.error_logger = self._setup_logger("error", logging.ERROR)
        self.info_logger = self._setup_logger("info", info_level)
        self.upstream_logger = self._setup_logger("upstream", logging.DEBUG)

    def _setup_logger(self, name: str, level: int) -> logging.Logger:
        """Setup a logger with rotating file handler"""
        logger = logging.getLogger(f"watchnext.{name}")
        logger.setLevel(level)

        # Prevent duplicate handlers
        if logger.handlers:
            return logger

        # Create rotating file handler (10MB max, 3 backups)
        log_file = self.log_dir / f"{name}.log"
        handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=3,
        )

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger

    def error(self, message: str, **kwargs):
        """Log error message"""
        self.error_logger.error(message, extra=kwargs)

    def info(self, message: str, **kwargs):
        """Log info message"""
        self.info_logger.info(message, extra=kwargs)

    def upstream(self, message: str, **kwargs):
        """Log an outbound call to a third-party API"""
        self.upstream_logger.info(message, extra=kwargs)


# Global log service instance
log_service = LogService()
