from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from core.errors import NoAccessibleResource
from core.logging_config import logger
from core.permission_helpers import default_landing_path, is_known_role
from core.permissions import SELECTABLE_ROLES
from core.rate_limiter import require_login_rate_limit
from core.session_store import init_session, teardown_session
from dependencies.auth import get_current_session
from models.auth import LoginRequest, LoginResponse, RoleOption, Session
from services.user_store import verify_credentials


router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


# ============================================================
# CHOOSE YOUR POSITION
# ============================================================
@router.get("/roles", response_model=List[RoleOption], summary="Positions offered at login")
def list_roles():
    return [
        RoleOption(role=role.value, display_name=name)
        for role, name in SELECTABLE_ROLES.items()
    ]


# ============================================================
# LOGIN (users table)
# ============================================================
@router.post("/login", response_model=LoginResponse, summary="Authenticate user")
def login(payload: LoginRequest, request: Request, response: Response):
    require_login_rate_limit(request)

    username = payload.username.strip()

    session = verify_credentials(username, payload.password)
    if session is None:
        raise HTTPException(status_code=401, detail="Invalid username or password")

    init_session(response, session)

    landing_path = None
    if is_known_role(session.role):
        try:
            landing_path = default_landing_path(session.role)
        except NoAccessibleResource:
            logger.error(f"Configuration error: role {session.role!r} has no accessible resources")
    else:
        logger.warning(f"User {session.username} logged in with unrecognized role {session.role!r}")

    return LoginResponse(session=session, landing_path=landing_path)


# ============================================================
# LOGOUT
# ============================================================
@router.post("/logout", summary="End the current session")
def logout(response: Response):
    teardown_session(response)
    return {"status": "logged_out"}


# ============================================================
# CURRENT SESSION
# ============================================================
@router.get("/me", response_model=Session, summary="Current session")
def read_me(session: Session = Depends(get_current_session)):
    return session
