# services/user_store.py

from typing import Optional

from core.errors import handle_supabase_error
from core.logging_config import logger
from core.security import verify_password
from core.supabase_client import get_supabase_client
from models.auth import Session


USERS_TABLE = "users"


def session_from_user_row(row: dict) -> Session:
    """Map a users-table row onto the session record."""
    location = row.get("locationid")
    return Session(
        user_id=str(row.get("user_id")),
        username=row.get("username"),
        role=str(row.get("role") or ""),
        location_id=str(location) if location is not None else None,
    )


def verify_credentials(username: str, password: str) -> Optional[Session]:
    """
    Look the user up by username and verify the bcrypt password_hash.
    Returns the session record, or None for unknown user / wrong password.
    Store failures surface as HTTPException.
    """
    client = get_supabase_client()
    if not client:
        raise handle_supabase_error(RuntimeError("client not configured"), "Login")

    try:
        result = (
            client.table(USERS_TABLE)
            .select("user_id, username, password_hash, role, locationid")
            .eq("username", username)
            .limit(1)
            .execute()
        )
    except Exception as e:
        raise handle_supabase_error(e, "Login")

    rows = result.data or []
    if not rows:
        logger.info(f"Login failed: no user named {username!r}")
        return None

    row = rows[0]
    if not verify_password(password, row.get("password_hash")):
        logger.info(f"Login failed: bad password for {username!r}")
        return None

    return session_from_user_row(row)
