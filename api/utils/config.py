# api/utils/config.py
import os
import logging

from wall_gap_adjuster.config import JunctionSettings

logger = logging.getLogger("wall_gap.api")

class Config:
    """Application configuration loaded from environment variables"""
    
    # API authentication
    API_KEY = os.environ.get("API_KEY", "dev_key")
    
    # Application settings
    DEBUG = os.environ.get("DEBUG", "false").lower() == "true"
    LOG_DIR = os.environ.get("LOG_DIR") or None
    ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
    PORT = int(os.environ.get("PORT", "8000"))
    
    @classmethod
    def validate(cls):
        """Validate critical configuration values"""
        if not cls.API_KEY or cls.API_KEY == "dev_key":
            logger.warning("Using development API key - not secure for production!")
            
        if cls.ENVIRONMENT == "production" and cls.DEBUG:
            logger.warning("DEBUG is enabled in a production environment")

    @staticmethod
    def junction_settings() -> JunctionSettings:
        """Engine tolerances, with any WALL_GAP_* overrides applied"""
        return JunctionSettings.from_env()
