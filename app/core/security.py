from __future__ import annotations

import hmac
import logging

from fastapi import Depends, Header

from app.core.config import Settings, get_settings
from app.core.errors import APIError

logger = logging.getLogger(__name__)


def keys_match(supplied: str | None, expected: str | None) -> bool:
    if not expected or not supplied:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


async def require_api_key(
    x_api_key: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Reject the request unless ``X-API-Key`` equals the deployment secret."""
    if not settings.custom_api_key:
        logger.warning("CUSTOM_API_KEY is not configured; rejecting request")
        raise APIError.auth()
    if not keys_match(x_api_key, settings.custom_api_key):
        logger.warning("Rejected request with %s API key", "missing" if not x_api_key else "invalid")
        raise APIError.auth()
