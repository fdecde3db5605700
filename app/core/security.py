# app/core/security.py
import logging
import secrets
from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security.api_key import APIKeyHeader
from app.core.config import get_settings, Settings

logger = logging.getLogger("security")
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)

def validate_api_key(
    request: Request,
    api_key: str = Security(api_key_header),
    settings: Settings = Depends(get_settings),
) -> bool:
    if not api_key or not secrets.compare_digest(api_key.encode(), settings.API_KEY.encode()):
        logger.info("api_key_rejected", extra={"path": request.url.path})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key",
        )
    return True
