from __future__ import annotations

from fastapi import HTTPException, Request, status

from fitcore.config import get_settings
from fitcore.logging_config import get_logger
from fitcore.rate_limit import RateLimiter

logger = get_logger(__name__)

# stale per-client windows are swept once the table grows past this many keys
PURGE_THRESHOLD = 1024


def client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def get_rate_limiter(request: Request) -> RateLimiter:
    return request.app.state.rate_limiter


def enforce_rate_limit(request: Request, scope: str, max_requests: int, window_ms: int) -> None:
    """Count the request against scope:client and raise 429 once over the limit."""
    settings = get_settings()
    if not settings.rate_limit_enabled:
        return
    limiter = get_rate_limiter(request)
    if len(limiter) > PURGE_THRESHOLD:
        purged = limiter.purge_expired()
        logger.debug("rate_limit_purged", extra={"ctx_purged": purged})
    key = f"{scope}:{client_key(request)}"
    result = limiter.check(key, max_requests, window_ms)
    if result.allowed:
        return
    logger.warning("rate_limited", extra={"ctx_scope": scope, "ctx_key": key})
    raise HTTPException(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        detail={"code": "RATE_LIMITED", "message": "Rate limit exceeded"},
        headers={
            "Retry-After": str(result.retry_after_seconds(limiter.now_ms())),
            "X-RateLimit-Remaining": str(result.remaining),
        },
    )


def generic_rate_limit(request: Request) -> None:
    settings = get_settings()
    enforce_rate_limit(request, "api", settings.rate_limit_default_requests, settings.rate_limit_window_ms)


def profile_update_rate_limit(request: Request) -> None:
    settings = get_settings()
    enforce_rate_limit(request, "profile_update", settings.profile_update_requests, settings.rate_limit_window_ms)
