"""
Wire Master - Security Middleware

Rate limiting, security headers.
"""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address
from typing import Callable

from ..config import settings


# ============================================
# RATE LIMITER
# ============================================

limiter = Limiter(key_func=get_remote_address)


def levels_rate_limit() -> str:
    """Rate limit string for the level endpoints."""
    return f"{settings.RATE_LIMIT_LEVELS}/minute"


# ============================================
# SECURITY HEADERS MIDDLEWARE
# ============================================

async def add_security_headers(request: Request, call_next: Callable):
    """Adds security headers to every response."""
    response = await call_next(request)

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

    if settings.is_production:
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

    if not settings.DEBUG:
        response.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'"

    return response
