# tests/test_revenue.py

"""
Tests for revenue aggregation and the revenue summary endpoint.
"""

from datetime import date

from fastapi.testclient import TestClient
from unittest.mock import patch, Mock

from models.enums import DateRange
from models.revenue import Location, RevenueDashboard, RevenueRow
from services.revenue import (
    bucket_by_location,
    bucket_daily,
    build_dashboard,
    from_date_for,
    load_revenue_dashboard,
    summarize,
)


LOCATIONS = [
    Location(id=1, name="Downtown"),
    Location(id=2, name="Harbour"),
]

ROWS = [
    RevenueRow(id=1, location_id=1, date="2026-10-02", daily_revenue=1200, target_revenue=1000, customer_count=40),
    RevenueRow(id=2, location_id=2, date="2026-10-01", daily_revenue=800, target_revenue=900, customer_count=20),
    RevenueRow(id=3, location_id=1, date="2026-10-01", daily_revenue=1000, target_revenue=1000, customer_count=25),
]


def test_daily_buckets_are_grouped_and_ordered():
    daily = bucket_daily(ROWS, LOCATIONS)

    assert [b.date for b in daily] == ["2026-10-01", "2026-10-02"]
    first = daily[0]
    assert first.revenue == 1800
    assert first.target == 1900
    assert first.customers == 45
    assert first.revenue_by_location == {1: 1000, 2: 800}
    assert daily[1].revenue_by_location == {1: 1200, 2: 0}


def test_location_buckets():
    by_location = bucket_by_location(ROWS, LOCATIONS)

    downtown, harbour = by_location
    assert downtown.revenue == 2200
    assert downtown.customers == 65
    assert downtown.days_count == 2
    assert round(downtown.average_bill, 2) == 33.85
    assert harbour.average_bill == 40


def test_location_without_customers_has_zero_average_bill():
    rows = [RevenueRow(id=9, location_id=2, date="2026-10-01", daily_revenue=50, customer_count=0)]

    assert bucket_by_location(rows, LOCATIONS)[1].average_bill == 0


def test_summary_counts_days_at_or_above_target():
    summary = summarize(ROWS, LOCATIONS)

    downtown, harbour = summary
    assert downtown.days_above_target == 2
    assert downtown.average_revenue == 1100
    assert harbour.days_above_target == 0
    assert harbour.total_days == 1


def test_summary_handles_locations_without_rows():
    summary = summarize([], LOCATIONS)

    assert all(s.total_days == 0 and s.average_revenue == 0 for s in summary)


def test_from_date_uses_range():
    assert from_date_for(DateRange.last_7_days, today=date(2026, 10, 19)) == date(2026, 10, 12)
    assert from_date_for(DateRange.last_30_days, today=date(2026, 10, 19)) == date(2026, 9, 19)


def test_load_dashboard_queries_supabase(mock_supabase_client):
    locations_query = Mock()
    locations_query.select.return_value.eq.return_value.order.return_value.execute.return_value = Mock(
        data=[{"id": 1, "name": "Downtown", "city": "X", "address": "Y", "isactive": True}]
    )
    revenue_query = Mock()
    revenue_query.select.return_value.gte.return_value.eq.return_value.order.return_value.execute.return_value = Mock(
        data=[{"id": 1, "location_id": 1, "date": "2026-10-01", "daily_revenue": 500,
               "target_revenue": 400, "customer_count": 10}]
    )
    mock_supabase_client.table.side_effect = lambda name: {
        "locations": locations_query,
        "revenue_data": revenue_query,
    }[name]

    with patch("services.revenue.get_supabase_client", return_value=mock_supabase_client):
        dashboard = load_revenue_dashboard(DateRange.last_7_days, location_id=1)

    revenue_query.select.return_value.gte.return_value.eq.assert_called_once_with("location_id", 1)
    assert dashboard.range == "7d"
    assert dashboard.summary[0].total_revenue == 500


# ============================================================
# Endpoint
# ============================================================
def _dashboard():
    return build_dashboard(ROWS, LOCATIONS, DateRange.last_14_days, date(2026, 9, 30))


def test_owner_gets_revenue_summary(client: TestClient, login_as):
    login_as("owner")

    with patch("routers.dashboard.load_revenue_dashboard", return_value=_dashboard()) as load:
        response = client.get("/owner/revenue/summary", params={"range": "14d"})

    assert response.status_code == 200
    load.assert_called_once_with(DateRange.last_14_days, None)
    data = RevenueDashboard(**response.json())
    assert len(data.daily) == 2


def test_staff_redirected_away_from_revenue(client: TestClient, login_as):
    login_as("staff")

    response = client.get("/staff/revenue/summary", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/staff/table-reservation"


def test_anonymous_cannot_read_revenue_data(client: TestClient):
    response = client.get("/owner/revenue/summary")

    assert response.status_code == 401


def test_unknown_role_cannot_read_revenue_data_even_when_guard_allows(client: TestClient, login_as):
    login_as("superadmin")

    response = client.get("/owner/revenue/summary")

    assert response.status_code == 403
