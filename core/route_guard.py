# core/route_guard.py

"""
Route guard.

Every request path is evaluated from scratch and ends in one of:

    authorized    serve the page
    redirecting   send the user to their role's landing page
                  (307 for GET/HEAD, 303 for anything else)
    denied        403, generic access-denied body

Anonymous requests are never blocked. Sessions with an unrecognized role
follow ON_UNKNOWN_ROLE ("allow" or "deny").
"""

from typing import Iterable, Optional

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel
from starlette.middleware.base import BaseHTTPMiddleware

from core.config import settings
from core.errors import NoAccessibleResource, UnknownRole
from core.logging_config import logger
from core.permission_helpers import (
    default_landing_path,
    is_path_permitted,
    resolve_role,
)
from core.session_store import read_session
from models.auth import Session
from models.enums import GuardState, UnknownRolePolicy


ACCESS_DENIED = "Access denied"


class GuardDecision(BaseModel):
    state: GuardState
    path: str
    redirect_to: Optional[str] = None
    reason: str = ""

    @property
    def allowed(self) -> bool:
        return self.state == GuardState.authorized


class RouteGuard:
    def __init__(self, on_unknown_role: UnknownRolePolicy = UnknownRolePolicy.allow):
        self.on_unknown_role = UnknownRolePolicy(on_unknown_role)

    def evaluate(self, session: Optional[Session], path: str) -> GuardDecision:
        # No session: guard is inert
        if session is None:
            return GuardDecision(state=GuardState.authorized, path=path, reason="anonymous")

        try:
            role = resolve_role(session.role)
        except UnknownRole:
            if self.on_unknown_role == UnknownRolePolicy.allow:
                logger.info(f"No valid role found: {session.role!r}, allowing {path}")
                return GuardDecision(state=GuardState.authorized, path=path, reason="unknown_role")
            logger.warning(f"Unknown role {session.role!r} denied {path}")
            return GuardDecision(state=GuardState.denied, path=path, reason="unknown_role")

        if is_path_permitted(role, path):
            return GuardDecision(state=GuardState.authorized, path=path, reason="permitted")

        try:
            landing = default_landing_path(role)
        except NoAccessibleResource:
            logger.error(f"Configuration error: role {role.value!r} has no accessible resources")
            return GuardDecision(state=GuardState.denied, path=path, reason="no_accessible_resource")

        logger.info(f"Access denied: {role.value} cannot access {path}, redirecting to {landing}")
        return GuardDecision(
            state=GuardState.redirecting,
            path=path,
            redirect_to=landing,
            reason="not_permitted",
        )


def get_route_guard() -> RouteGuard:
    return RouteGuard(on_unknown_role=settings.ON_UNKNOWN_ROLE)


def is_exempt(path: str, prefixes: Iterable[str]) -> bool:
    return any(path == p or path.startswith(p.rstrip("/") + "/") for p in prefixes)


# ============================================================
# Middleware
# ============================================================
class RouteGuardMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, guard: Optional[RouteGuard] = None, exempt_prefixes: Optional[Iterable[str]] = None):
        super().__init__(app)
        self.guard = guard
        self.exempt_prefixes = list(
            exempt_prefixes if exempt_prefixes is not None else settings.GUARD_EXEMPT_PREFIXES
        )

    async def dispatch(self, request: Request, call_next):
        path = request.url.path

        if request.method == "OPTIONS" or is_exempt(path, self.exempt_prefixes):
            return await call_next(request)

        guard = self.guard or get_route_guard()
        decision = guard.evaluate(read_session(request), path)

        if decision.state == GuardState.redirecting:
            # 303 turns a refused form post into a GET of the landing page
            status_code = 307 if request.method in ("GET", "HEAD") else 303
            return RedirectResponse(decision.redirect_to, status_code=status_code)
        if decision.state == GuardState.denied:
            return JSONResponse(status_code=403, content={"detail": ACCESS_DENIED})

        return await call_next(request)
