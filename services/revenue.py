# services/revenue.py

"""
Revenue dashboard data.

Rows from `revenue_data` are grouped three ways for the charts:

    daily         one bucket per date, with a per-location revenue split
    by_location   totals per active location for the comparison view
    summary       per-location KPIs (average per day, days at/above target)

The grouping functions are pure; only `load_revenue_dashboard` talks to Supabase.
"""

from datetime import date, timedelta
from typing import Dict, List, Optional

from core.errors import handle_supabase_error
from core.supabase_client import get_supabase_client
from models.enums import DateRange
from models.revenue import (
    DailyBucket,
    Location,
    LocationBucket,
    LocationSummary,
    RevenueDashboard,
    RevenueRow,
)


# ============================================================
# Pure aggregation
# ============================================================
def bucket_daily(rows: List[RevenueRow], locations: List[Location]) -> List[DailyBucket]:
    buckets: Dict[str, DailyBucket] = {}

    for row in sorted(rows, key=lambda r: r.date):
        bucket = buckets.get(row.date)
        if bucket is None:
            bucket = DailyBucket(
                date=row.date,
                revenue=0,
                target=0,
                customers=0,
                revenue_by_location={loc.id: 0.0 for loc in locations},
            )
            buckets[row.date] = bucket

        bucket.revenue += float(row.daily_revenue)
        bucket.target += float(row.target_revenue)
        bucket.customers += row.customer_count
        bucket.revenue_by_location[row.location_id] = (
            bucket.revenue_by_location.get(row.location_id, 0.0) + float(row.daily_revenue)
        )

    return list(buckets.values())


def bucket_by_location(rows: List[RevenueRow], locations: List[Location]) -> List[LocationBucket]:
    result = []
    for location in locations:
        location_rows = [r for r in rows if r.location_id == location.id]

        revenue = sum(float(r.daily_revenue) for r in location_rows)
        target = sum(float(r.target_revenue) for r in location_rows)
        customers = sum(r.customer_count for r in location_rows)

        result.append(
            LocationBucket(
                location_id=location.id,
                name=location.name,
                revenue=revenue,
                target=target,
                customers=customers,
                average_bill=revenue / customers if customers else 0.0,
                days_count=len(location_rows),
            )
        )
    return result


def summarize(rows: List[RevenueRow], locations: List[Location]) -> List[LocationSummary]:
    result = []
    for location in locations:
        location_rows = [r for r in rows if r.location_id == location.id]

        total_revenue = sum(float(r.daily_revenue) for r in location_rows)
        total_days = len(location_rows)

        result.append(
            LocationSummary(
                location_id=location.id,
                location_name=location.name,
                total_revenue=total_revenue,
                average_revenue=total_revenue / total_days if total_days else 0.0,
                total_customers=sum(r.customer_count for r in location_rows),
                days_above_target=sum(
                    1 for r in location_rows if float(r.daily_revenue) >= float(r.target_revenue)
                ),
                total_days=total_days,
            )
        )
    return result


def from_date_for(range_: DateRange, today: Optional[date] = None) -> date:
    today = today or date.today()
    return today - timedelta(days=range_.days)


def build_dashboard(
    rows: List[RevenueRow],
    locations: List[Location],
    range_: DateRange,
    from_date: date,
    location_id: Optional[int] = None,
) -> RevenueDashboard:
    return RevenueDashboard(
        range=range_.value,
        from_date=from_date.isoformat(),
        location_id=location_id,
        daily=bucket_daily(rows, locations),
        by_location=bucket_by_location(rows, locations),
        summary=summarize(rows, locations),
    )


# ============================================================
# Supabase loading
# ============================================================
def load_revenue_dashboard(
    range_: DateRange = DateRange.last_14_days,
    location_id: Optional[int] = None,
) -> RevenueDashboard:
    client = get_supabase_client()
    if not client:
        raise handle_supabase_error(RuntimeError("client not configured"), "Failed to load revenue")

    from_date = from_date_for(range_)

    try:
        locations_result = (
            client.table("locations")
            .select("*")
            .eq("isactive", True)
            .order("name")
            .execute()
        )

        query = (
            client.table("revenue_data")
            .select("id, location_id, date, daily_revenue, target_revenue, customer_count, average_bill, created_at")
            .gte("date", from_date.isoformat())
        )
        if location_id is not None:
            query = query.eq("location_id", location_id)

        revenue_result = query.order("date").execute()
    except Exception as e:
        raise handle_supabase_error(e, "Failed to load revenue")

    locations = [Location(**row) for row in (locations_result.data or [])]
    rows = [RevenueRow(**row) for row in (revenue_result.data or [])]

    return build_dashboard(rows, locations, range_, from_date, location_id)
