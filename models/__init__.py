# -------------------------
# Enums
# -------------------------
from .enums import (
    Role,
    Resource,
    GuardState,
    UnknownRolePolicy,
    DateRange,
)

# -------------------------
# Session / Auth Models
# -------------------------
from .auth import (
    Session,
    LoginRequest,
    LoginResponse,
    RoleOption,
    NavigationItem,
    NavigationResponse,
)

# -------------------------
# Revenue Models
# -------------------------
from .revenue import (
    Location,
    RevenueRow,
    DailyBucket,
    LocationBucket,
    LocationSummary,
    RevenueDashboard,
)

__all__ = [
    # enums
    "Role",
    "Resource",
    "GuardState",
    "UnknownRolePolicy",
    "DateRange",

    # auth
    "Session",
    "LoginRequest",
    "LoginResponse",
    "RoleOption",
    "NavigationItem",
    "NavigationResponse",

    # revenue
    "Location",
    "RevenueRow",
    "DailyBucket",
    "LocationBucket",
    "LocationSummary",
    "RevenueDashboard",
]
