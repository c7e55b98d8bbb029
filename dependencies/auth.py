from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from core.permission_helpers import permitted_resources
from core.session_store import read_session
from models.auth import Session
from models.enums import Resource


# ============================================================
# OPTIONAL SESSION (anonymous browsing allowed)
# ============================================================
def get_optional_session(request: Request) -> Optional[Session]:
    """
    Session from the "user" cookie, or None.
    Unreadable cookies are treated as no session.
    """
    return read_session(request)


# ============================================================
# REQUIRED SESSION
# ============================================================
def get_current_session(
    session: Optional[Session] = Depends(get_optional_session),
) -> Session:
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return session


# ============================================================
# PANEL CHECK (server-side, for data endpoints)
# ============================================================
def requires_resource(resource: Resource):
    """
    Usage:
        @router.get("/...", dependencies=[Depends(requires_resource(Resource.revenue))])

    The route guard only steers navigation; data endpoints re-check here.
    """

    def dependency(session: Session = Depends(get_current_session)) -> Session:
        if resource not in permitted_resources(session.role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient permissions: '{resource.value}' required",
            )
        return session

    return dependency
