"""
Cross-origin policy
"""

from collections.abc import Callable

from fastapi import Request, Response
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import get_logger

logger = get_logger(__name__)

ALLOWED_ORIGINS: tuple[str, ...] = ("http://example.com", "https://example.com")


def is_origin_allowed(origin: str | None, same_origin: str | None = None) -> bool:
    """Decide whether a request carrying ``origin`` may reach the application.

    Requests without an Origin header (non-browser clients, same-origin
    navigation) and same-origin browser requests are allowed. Any other origin
    must match an entry of ``ALLOWED_ORIGINS`` exactly.
    """
    if not origin:
        return True
    if same_origin is not None and origin == same_origin:
        return True
    return origin in ALLOWED_ORIGINS


def request_origin(request: Request) -> str:
    """The origin the request was addressed to, e.g. ``http://localhost:3000``."""
    return f"{request.url.scheme}://{request.url.netloc}"


class OriginPolicyMiddleware(BaseHTTPMiddleware):
    """Reject requests from disallowed origins before any route runs."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        origin = request.headers.get("origin")

        if not is_origin_allowed(origin, same_origin=request_origin(request)):
            logger.warning(
                "Rejected request from disallowed origin",
                origin=origin,
                method=request.method,
                path=request.url.path,
            )
            return PlainTextResponse("Not allowed by CORS", status_code=403)

        return await call_next(request)
