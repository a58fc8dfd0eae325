"""HTTP rate limiter for the AI routes."""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from resumelm.config import settings


def caller_key(request: Request) -> str:
    """Limit per authenticated caller, falling back to client address."""
    return request.headers.get("X-User-ID") or get_remote_address(request)


limiter = Limiter(key_func=caller_key)


def ai_route_limit(func):
    """Apply the optional per-route HTTP quota (AI_ROUTE_LIMIT, e.g. "30/minute").

    Unset by default: the AI actions' own fixed-window limiter is the quota.
    """
    if settings.ai_route_limit:
        return limiter.limit(settings.ai_route_limit)(func)
    return func
