# core/rate_limiter.py

from typing import Dict, Tuple, Optional
from fastapi import HTTPException, Request
from collections import defaultdict
import time

from core.config import settings
from core.logging_config import logger


# In-memory, per process. Login attempts only.
_rate_limit_store: Dict[str, list] = defaultdict(list)


def check_rate_limit(
    identifier: str,
    max_requests: int = 10,
    window_seconds: int = 60,
) -> Tuple[bool, int]:
    """
    Sliding-window check.

    Returns:
        Tuple of (allowed: bool, remaining: int)
    """
    now = time.time()
    window_start = now - window_seconds

    requests = [ts for ts in _rate_limit_store[identifier] if ts > window_start]

    if len(requests) >= max_requests:
        _rate_limit_store[identifier] = requests
        return False, 0

    requests.append(now)
    _rate_limit_store[identifier] = requests

    return True, max_requests - len(requests)


def get_rate_limit_identifier(request: Request, scope: str = "login") -> str:
    """
    Client IP, honouring X-Forwarded-For behind a proxy.
    """
    client_ip = request.client.host if request.client else "unknown"

    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()

    return f"{scope}:{client_ip}"


def require_login_rate_limit(request: Request, identifier: Optional[str] = None) -> int:
    """
    Raises 429 once a client exceeds LOGIN_RATE_LIMIT attempts per window.
    """
    if identifier is None:
        identifier = get_rate_limit_identifier(request)

    max_requests = settings.LOGIN_RATE_LIMIT
    window_seconds = settings.LOGIN_RATE_WINDOW_SECONDS

    allowed, remaining = check_rate_limit(identifier, max_requests, window_seconds)

    if not allowed:
        logger.warning(f"Login rate limit exceeded for {identifier}")
        raise HTTPException(
            status_code=429,
            detail=f"Rate limit exceeded. Maximum {max_requests} requests per {window_seconds} seconds.",
            headers={
                "X-RateLimit-Limit": str(max_requests),
                "X-RateLimit-Window": str(window_seconds),
                "Retry-After": str(window_seconds),
            }
        )

    return remaining


def reset_rate_limits():
    _rate_limit_store.clear()
