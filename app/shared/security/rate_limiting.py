"""
Rate limiting configuration and setup.

Uses slowapi to enforce one request budget per client address across
the whole API surface, the way the original server mounted its limiter
on ``/api``. Health, metrics and the root index are never throttled.
Each application instance builds its own limiter so that counters
are not shared between apps (or between test cases).
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware, sync_check_limits
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

DEFAULT_RATE_LIMIT = "100 per 15 minutes"


def build_limiter(
    default_limit: str = DEFAULT_RATE_LIMIT, enabled: bool = True
) -> Limiter:
    """Create a per-remote-address limiter with in-memory storage.

    The limit is registered as an application limit, so every limited
    path draws from the same per-client bucket.

    Args:
        default_limit: slowapi limit string, e.g. "100 per 15 minutes".
        enabled: When False the limiter lets everything through.

    Returns:
        A configured Limiter instance.
    """
    return Limiter(
        key_func=get_remote_address,
        application_limits=[default_limit],
        enabled=enabled,
    )


class PrefixRateLimitMiddleware(SlowAPIMiddleware):
    """Apply the app's limiter to requests under a path prefix.

    The stock middleware decides per matched route endpoint. Requests are
    matched on their path here instead, which keeps working however the
    framework nests included routers.
    """

    def __init__(self, app: ASGIApp, prefix: str = "/api") -> None:
        super().__init__(app)
        self._prefix = prefix.rstrip("/")

    def _is_limited(self, path: str) -> bool:
        return path == self._prefix or path.startswith(self._prefix + "/")

    async def dispatch(self, request: Request, call_next) -> Response:
        limiter: Limiter = request.app.state.limiter
        if not limiter.enabled or not self._is_limited(request.url.path):
            return await call_next(request)

        error_response, inject_headers = sync_check_limits(
            limiter, request, None, request.app
        )
        if error_response is not None:
            return error_response

        response = await call_next(request)
        if inject_headers:
            response = limiter._inject_headers(
                response, request.state.view_rate_limit
            )
        return response


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Synchronous, because the middleware calls it directly.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={
            "error": "Too many requests",
            "message": f"Rate limit exceeded ({exc.detail}). Please try again later.",
        },
    )
