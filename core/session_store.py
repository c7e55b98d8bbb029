# core/session_store.py

"""
Session accessor.

The authenticated identity lives in a single signed cookie (default name
"user"). All reads and writes go through this module:

    init_session      login, single write
    read_session      every navigation and guard check
    teardown_session  logout, single delete

The role inside the cookie is signed but NOT re-checked against the users
table on each request. Treat it as UI state; data endpoints that need real
authorization must verify server-side.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request, Response
from jose import JWTError, jwt
from pydantic import ValidationError

from core.config import settings
from core.errors import SessionStoreUnavailable
from core.logging_config import logger
from models.auth import Session


def _secret() -> str:
    if not settings.SESSION_SECRET_KEY:
        raise SessionStoreUnavailable("SESSION_SECRET_KEY is not configured")
    return settings.SESSION_SECRET_KEY


# ============================================================
# Encode / decode
# ============================================================
def encode_session(session: Session) -> str:
    expires = datetime.now(timezone.utc) + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)
    payload = {
        "sub": session.user_id,
        "username": session.username,
        "role": session.role,
        "location_id": session.location_id,
        "exp": expires,
    }
    return jwt.encode(payload, _secret(), algorithm=settings.SESSION_ALGORITHM)


def decode_session(token: str) -> Session:
    """
    Raises SessionStoreUnavailable for a bad signature, an expired token
    or a payload that is not a session record.
    """
    try:
        payload = jwt.decode(token, _secret(), algorithms=[settings.SESSION_ALGORITHM])
    except JWTError as e:
        raise SessionStoreUnavailable(f"Unreadable session: {e}") from e

    try:
        return Session(
            user_id=payload.get("sub"),
            username=payload.get("username"),
            role=payload.get("role"),
            location_id=payload.get("location_id"),
        )
    except ValidationError as e:
        raise SessionStoreUnavailable("Malformed session payload") from e


# ============================================================
# Lifecycle
# ============================================================
def init_session(response: Response, session: Session) -> str:
    token = encode_session(session)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    logger.info(f"Session started for {session.username} ({session.role})")
    return token


def read_session(request: Request) -> Optional[Session]:
    """
    Current session, or None when absent.
    An unreadable cookie is logged and treated as no session.
    """
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None

    try:
        return decode_session(token)
    except SessionStoreUnavailable as e:
        logger.warning(f"Ignoring session cookie: {e}")
        return None


def teardown_session(response: Response) -> None:
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME)
