# core/errors.py

from fastapi import HTTPException


# ============================================================
# Access-control conditions
# ============================================================
class AccessControlError(Exception):
    """Base class for role / session conditions handled by the guard."""


class UnknownRole(AccessControlError):
    """Session role is not present in the permission mapping."""

    def __init__(self, role):
        self.role = role
        super().__init__(f"Unknown role: {role!r}")


class NoAccessibleResource(AccessControlError):
    """A role maps to zero panels. Treated as a configuration error."""

    def __init__(self, role):
        self.role = role
        super().__init__(f"Role {role!r} has no accessible resources")


class SessionStoreUnavailable(AccessControlError):
    """The session cookie could not be read (bad signature, expired, malformed)."""


# ============================================================
# Supabase errors
# ============================================================
def extract_supabase_error(error: Exception) -> str:
    """
    Safely extract readable details from Supabase Python client errors.
    Handles:
      • PostgREST errors
      • Generic Python exceptions
    """

    if hasattr(error, "message"):
        try:
            return str(error.message)
        except Exception:
            pass

    if hasattr(error, "args") and error.args:
        try:
            return str(error.args[0])
        except Exception:
            pass

    try:
        return str(error)
    except Exception:
        return "Unknown Supabase error"


def handle_supabase_error(error: Exception, operation: str = "Database operation", status_code: int = 500) -> HTTPException:
    """
    Handle Supabase errors with consistent formatting.
    Returns HTTPException (doesn't raise) so caller can customize or re-raise.

    Args:
        error: The exception that occurred
        operation: Description of what operation failed (e.g., "Failed to load revenue")
        status_code: HTTP status code (default 500)
    """
    from core.logging_config import logger

    error_detail = extract_supabase_error(error)
    logger.error(f"{operation}: {error_detail}")

    error_lower = error_detail.lower()
    if "not found" in error_lower or "does not exist" in error_lower:
        return HTTPException(status_code=404, detail=f"{operation}: Resource not found")
    return HTTPException(status_code=status_code, detail=f"{operation} failed")
