# routers/navigation.py

from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.navigation import build_navigation
from dependencies.auth import get_optional_session
from models.auth import NavigationResponse, Session

router = APIRouter(
    prefix="/navigation",
    tags=["Navigation"],
)


@router.get("", response_model=NavigationResponse, summary="Left-panel entries for the current session")
def get_navigation(
    current_path: Optional[str] = Query(None, description="Marks the matching entry as active"),
    session: Optional[Session] = Depends(get_optional_session),
):
    """
    Entries the current role may open, in landing-page order.
    Anonymous callers get an empty list.
    """
    return NavigationResponse(
        role=session.role if session else None,
        items=build_navigation(session, current_path),
    )
