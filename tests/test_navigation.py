# tests/test_navigation.py

"""
Tests for navigation entries and their agreement with the guard.
"""

import pytest
from fastapi.testclient import TestClient

from core.config_validator import validate_permission_mapping
from core.navigation import build_navigation
from core.permission_helpers import is_path_permitted, permitted_paths
from core.permissions import ROLE_RESOURCES
from models.enums import Role


def test_no_session_renders_nothing():
    assert build_navigation(None) == []


def test_unknown_role_renders_nothing(make_session):
    assert build_navigation(make_session("superadmin")) == []


def test_kitchen_navigation(make_session):
    items = build_navigation(make_session("kitchen"), current_path="/kitchen/ordered-item")

    assert [(i.label, i.path) for i in items] == [
        ("Product & Inventory", "/kitchen/product-inventory"),
        ("Ordered Items", "/kitchen/ordered-item"),
    ]
    assert [i.active for i in items] == [False, True]


@pytest.mark.parametrize("role", list(Role))
def test_every_navigation_entry_passes_the_guard(role, make_session):
    items = build_navigation(make_session(role.value))

    assert tuple(i.path for i in items) == permitted_paths(role)
    assert all(is_path_permitted(role, i.path) for i in items)


def test_mapping_validates_clean():
    assert validate_permission_mapping() == []


def test_mapping_validation_reports_empty_role(monkeypatch):
    monkeypatch.setitem(ROLE_RESOURCES, Role.staff, ())

    problems = validate_permission_mapping()

    assert "role 'staff' has no resources" in problems


def test_navigation_endpoint_anonymous(client: TestClient):
    response = client.get("/navigation")

    assert response.status_code == 200
    assert response.json() == {"role": None, "items": []}


def test_navigation_endpoint_for_staff(client: TestClient, login_as):
    login_as("staff")

    response = client.get("/navigation", params={"current_path": "/staff/table-status"})

    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "staff"
    assert [i["resource"] for i in data["items"]] == [
        "table-reservation",
        "product-inventory",
        "table-status",
    ]
    assert data["items"][2]["active"] is True
