# trip_genie/web/security.py

from __future__ import annotations

import hmac
import time
from typing import Dict, Tuple

from fastapi import Header, HTTPException, status, Request

from trip_genie.config.settings import settings


# -------------------------------
# API key auth
# -------------------------------

def api_key_auth(x_api_key: str | None = Header(default=None, alias="X-API-Key")):
    """
    Header-based API key auth; disabled when settings.API_KEY is None.
    """
    expected = settings.API_KEY.get_secret_value() if settings.API_KEY else None
    if expected is None:
        return

    supplied = (x_api_key or "").encode("utf-8")
    if x_api_key is None or not hmac.compare_digest(supplied, expected.encode("utf-8")):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key.",
        )


# -------------------------------
# In-memory rate limiter
# -------------------------------

# client host -> (window_start, count)
_RATE_LIMIT_STATE: Dict[str, Tuple[float, int]] = {}


def reset_rate_limits() -> None:
    _RATE_LIMIT_STATE.clear()


def _drop_expired_windows(now: float) -> None:
    window = settings.RATE_LIMIT_WINDOW_SECONDS
    expired = [
        host for host, (started, _count) in _RATE_LIMIT_STATE.items()
        if now - started >= window
    ]
    for host in expired:
        del _RATE_LIMIT_STATE[host]


def rate_limiter(request: Request):
    """
    Per-client fixed-window limiter, single process only.
    Each /plan call costs a model request, so this mostly guards quota.
    """
    client_host = request.client.host if request.client else "unknown"

    now = time.time()
    _drop_expired_windows(now)
    window_start, count = _RATE_LIMIT_STATE.get(client_host, (now, 0))

    count += 1

    if count > settings.RATE_LIMIT_MAX_REQUESTS:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Rate limit exceeded. Try again later.",
        )

    _RATE_LIMIT_STATE[client_host] = (window_start, count)
