# tests/test_permissions.py

"""
Tests for the role → panel mapping and the access-control resolver.
"""

import pytest

from core.errors import NoAccessibleResource, UnknownRole
from core.permission_helpers import (
    canonical_path,
    default_landing_path,
    is_known_role,
    is_path_permitted,
    permitted_paths,
    permitted_resources,
    resolve_role,
)
from core.permissions import ROLE_RESOURCES
from models.enums import Resource, Role


ALL_ROLES = list(Role)


@pytest.mark.parametrize("role", ALL_ROLES)
def test_every_role_has_resources(role):
    assert len(permitted_resources(role)) > 0


@pytest.mark.parametrize("role", ALL_ROLES)
def test_every_permitted_canonical_path_is_permitted(role):
    for resource in permitted_resources(role):
        assert is_path_permitted(role, canonical_path(resource, role))


@pytest.mark.parametrize("role", ALL_ROLES)
def test_unlisted_resources_are_not_permitted(role):
    allowed = set(permitted_resources(role))
    for resource in Resource:
        if resource not in allowed:
            assert not is_path_permitted(role, canonical_path(resource, role))


@pytest.mark.parametrize("role", ALL_ROLES)
def test_other_roles_paths_are_not_permitted(role):
    for other in ALL_ROLES:
        if other == role:
            continue
        for path in permitted_paths(other):
            assert not is_path_permitted(role, path)


@pytest.mark.parametrize("role", ALL_ROLES)
def test_landing_path_is_first_resource(role):
    first = permitted_resources(role)[0]
    assert default_landing_path(role) == canonical_path(first, role)


def test_staff_resources_in_order():
    assert permitted_resources("staff") == (
        Resource.table_reservation,
        Resource.product_inventory,
        Resource.table_status,
    )


def test_string_and_enum_roles_agree():
    assert permitted_resources("owner") == permitted_resources(Role.owner)
    assert default_landing_path("kitchen") == "/kitchen/product-inventory"


def test_sub_routes_are_permitted_by_prefix():
    assert is_path_permitted("owner", "/owner/revenue/summary")
    assert is_path_permitted("owner", "/owner/revenue")


def test_unrelated_paths_are_not_permitted():
    assert not is_path_permitted("staff", "/staff/users")
    assert not is_path_permitted("staff", "/")
    assert not is_path_permitted("staff", "")
    assert not is_path_permitted("staff", None)


@pytest.mark.parametrize("role", [None, "", "superadmin", "Manager", 42])
def test_unknown_roles_get_nothing(role):
    assert permitted_resources(role) == ()
    assert not is_known_role(role)
    assert not is_path_permitted(role, "/admin/users")


def test_resolve_role_raises_for_unknown():
    with pytest.raises(UnknownRole):
        resolve_role("superadmin")
    assert resolve_role("admin") is Role.admin


def test_landing_path_fails_without_resources():
    with pytest.raises(NoAccessibleResource):
        default_landing_path("superadmin")


def test_mapping_is_static_tuples():
    for resources in ROLE_RESOURCES.values():
        assert isinstance(resources, tuple)
