from typing import Dict, List, Optional
from pydantic import BaseModel


class Location(BaseModel):
    id: int
    name: str
    city: Optional[str] = None
    address: Optional[str] = None
    isactive: bool = True


class RevenueRow(BaseModel):
    """One row of the revenue_data table."""

    id: int
    location_id: int
    date: str                       # ISO date (YYYY-MM-DD)
    daily_revenue: float = 0
    target_revenue: float = 0
    customer_count: int = 0
    average_bill: Optional[float] = None
    created_at: Optional[str] = None


# -----------------------------------------------------
# Chart-ready buckets
# -----------------------------------------------------
class DailyBucket(BaseModel):
    date: str
    revenue: float
    target: float
    customers: int
    revenue_by_location: Dict[int, float] = {}


class LocationBucket(BaseModel):
    location_id: int
    name: str
    revenue: float
    target: float
    customers: int
    average_bill: float
    days_count: int


class LocationSummary(BaseModel):
    location_id: int
    location_name: str
    total_revenue: float
    average_revenue: float
    total_customers: int
    days_above_target: int
    total_days: int


class RevenueDashboard(BaseModel):
    range: str
    from_date: str
    location_id: Optional[int] = None
    daily: List[DailyBucket] = []
    by_location: List[LocationBucket] = []
    summary: List[LocationSummary] = []
