# routers/health.py

"""
Liveness checks for the dashboard API and its Supabase tables.
Mounted under /health, which the route guard skips, so monitors need no session.
"""

from fastapi import APIRouter

from core.config import settings
from core.logging_config import logger
from core.supabase_client import ping_supabase

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get("/app", summary="Dashboard API is up")
async def health_app():
    return {
        "service": settings.PROJECT_NAME,
        "status": "ok",
        "env": settings.ENV,
    }


@router.get("/db", summary="Users, locations and revenue tables answer")
async def health_db():
    """
    Reads one row from each table the login and revenue screens need.
    A reachable store with any failing table reports "degraded".
    """
    report = ping_supabase()
    tables = report.get("tables", {})
    failing = sorted(t for t, result in tables.items() if result.get("status") != "ok")

    status = report.get("status", "unknown")
    if status == "ok" and failing:
        status = "degraded"
        logger.warning(f"Dashboard tables not answering: {', '.join(failing)}")

    return {
        "service": "Supabase",
        "status": status,
        "failing_tables": failing,
        "details": report,
    }
