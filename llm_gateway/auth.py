"""Static shared-secret guard for the LLM routes."""

import hmac
from typing import Mapping, Optional

from fastapi import Request

from .errors import AuthError
from .settings import settings

API_KEY_HEADER = "x-api-key"
AUTH_FAILURE_MESSAGE = (
    "Invalid or missing API key. Please provide a valid API key in the x-api-key header."
)


def check_api_key(headers: Mapping[str, str], secret: Optional[str]) -> None:
    """Raise AuthError unless the x-api-key header equals ``secret`` exactly."""
    provided = headers.get(API_KEY_HEADER)
    if not provided or not secret:
        raise AuthError(AUTH_FAILURE_MESSAGE)
    if not hmac.compare_digest(provided.encode("utf-8"), secret.encode("utf-8")):
        raise AuthError(AUTH_FAILURE_MESSAGE)


def require_api_key(request: Request) -> None:
    check_api_key(request.headers, settings.API_KEY)
