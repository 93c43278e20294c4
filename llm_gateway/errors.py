"""Gateway error taxonomy.

Every error carries the HTTP status it maps to and renders into the
``{success: false, message, error?}`` failure envelope.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from .envelopes.reconcile import render_failure
from .generate.types import GenerationFailure


class GatewayError(Exception):
    status_code: int = 500

    def __init__(self, message: str, error: Any = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.error = error
        if status_code is not None:
            self.status_code = status_code

    def to_body(self) -> Dict[str, Any]:
        return render_failure(self.message, self.error)


class AuthError(GatewayError):
    status_code = 401


class ValidationError(GatewayError):
    status_code = 400


class RouteNotFoundError(GatewayError):
    status_code = 404


class MethodNotAllowedError(GatewayError):
    status_code = 405


class UpstreamError(GatewayError):
    """The provider call failed; the failure's message and code are echoed."""

    status_code = 500

    def __init__(self, message: str, failure: GenerationFailure):
        super().__init__(message, error=failure.to_dict())
        self.failure = failure


class InternalError(GatewayError):
    status_code = 500
