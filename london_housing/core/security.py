from fastapi import HTTPException, Request
from starlette.status import HTTP_429_TOO_MANY_REQUESTS
from datetime import datetime, timezone
from .config import settings
from .cache import rate_cache

def rate_limit(request: Request):
    """
    Basic RPM limiter keyed by client IP. In-process, so best-effort
    when several workers serve the app. RATE_LIMIT_RPM=0 disables it.
    """
    if settings.RATE_LIMIT_RPM <= 0:
        return
    client_ip = request.client.host if request.client else "unknown"
    minute_bucket = datetime.now(timezone.utc).strftime("%Y%m%d%H%M")
    key = f"rate:{client_ip}:{minute_bucket}"

    count = (rate_cache.get(key) or 0) + 1
    if count > settings.RATE_LIMIT_RPM:
        raise HTTPException(status_code=HTTP_429_TOO_MANY_REQUESTS, detail="Rate limit exceeded")
    rate_cache.set(key, count)
