# File: api/utils/auth.py
from typing import Optional

from fastapi import Header, HTTPException, status, Depends
from api.utils.config import Config
import logging

logger = logging.getLogger("wall_gap.api")


def _mask(key: str) -> str:
    return key[:4] + "..." + key[-4:] if len(key) > 8 else "***masked***"


async def get_api_key(x_api_key: Optional[str] = Header(None)):
    """Validate API key from header."""
    if not x_api_key:
        logger.warning("Request without X-API-Key header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API Key"
        )

    logger.debug("Received API key: %s", _mask(x_api_key))
    
    # Check against configured API key
    if x_api_key == Config.API_KEY:
        return {"key": x_api_key, "environment": Config.ENVIRONMENT}
    
    logger.warning("Invalid API key provided")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid API Key"
    )

# Use this at the router level to ensure auth comes first
def auth_dependency():
    """Creates a dependency that requires authentication."""
    return Depends(get_api_key)
