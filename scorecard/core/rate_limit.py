from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from scorecard.core.config import settings

limiter = Limiter(key_func=get_remote_address)


def _current_limit() -> str:
    return settings.rate_limit


def rate_limit():
    """Per-client limit for grading routes; a no-op when RATE_LIMIT_ENABLED is off.

    The limit string is read per request so a changed ``settings`` applies
    without re-decorating routes.
    """
    if settings.rate_limit_enabled:
        return limiter.limit(_current_limit)

    def decorator(func):
        return func

    return decorator
