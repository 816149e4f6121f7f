"""
Rate limiting middleware
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from quizapp.core.config import settings
from quizapp.core.exceptions import create_error_response


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    Report an exceeded limit in the usual ``{"message": ...}`` shape

    Kept synchronous: SlowAPIMiddleware calls the registered handler directly.
    """
    return create_error_response(
        request=request,
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        error_code="RATE_LIMIT_ERROR",
        message=f"Rate limit exceeded: {exc.detail}",
    )


def add_rate_limiting(app: FastAPI) -> Limiter:
    """Apply the default per-client request limit to every route"""
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[f"{settings.RATE_LIMIT_REQUESTS}/{settings.RATE_LIMIT_PERIOD} seconds"],
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    return limiter
