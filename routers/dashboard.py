# routers/dashboard.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from core.navigation import build_navigation
from core.permission_helpers import canonical_path
from core.permissions import RESOURCE_LABELS
from dependencies.auth import get_optional_session, requires_resource
from models.auth import Session
from models.enums import DateRange, Resource, Role
from models.revenue import RevenueDashboard
from services.revenue import load_revenue_dashboard


router = APIRouter(
    tags=["Dashboard"],
)


def _parse_role(role: str) -> Role:
    try:
        return Role(role)
    except ValueError:
        raise HTTPException(status_code=404, detail="Not found")


def _parse_resource(resource: str) -> Resource:
    try:
        return Resource(resource)
    except ValueError:
        raise HTTPException(status_code=404, detail="Not found")


# -----------------------------------------------------
# GET /{role}/revenue/summary
# Chart-ready revenue buckets
# -----------------------------------------------------
@router.get("/{role}/revenue/summary", response_model=RevenueDashboard, summary="Revenue dashboard data")
def revenue_summary(
    role: str,
    range_: DateRange = Query(DateRange.last_14_days, alias="range", description="7d, 14d or 30d"),
    location_id: Optional[int] = Query(None),
    session: Session = Depends(requires_resource(Resource.revenue)),
):
    if _parse_role(role).value != session.role:
        raise HTTPException(status_code=403, detail="Access denied")

    return load_revenue_dashboard(range_, location_id)


# -----------------------------------------------------
# GET /{role}/{resource}
# Panel shell: what the page is and the navigation around it
# -----------------------------------------------------
@router.get("/{role}/{resource}", summary="Dashboard panel")
def panel(
    role: str,
    resource: str,
    request: Request,
    session: Optional[Session] = Depends(get_optional_session),
):
    parsed_role = _parse_role(role)
    parsed_resource = _parse_resource(resource)
    path = canonical_path(parsed_resource, parsed_role)

    return {
        "role": parsed_role.value,
        "resource": parsed_resource.value,
        "label": RESOURCE_LABELS[parsed_resource],
        "path": path,
        "navigation": build_navigation(session, request.url.path),
    }
