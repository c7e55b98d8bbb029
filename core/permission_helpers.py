from typing import Optional, Tuple, Union

from core.errors import NoAccessibleResource, UnknownRole
from core.permissions import ROLE_RESOURCES
from models.enums import Role, Resource


RoleLike = Union[Role, str, None]


# -----------------------------------------------------
# Role parsing
# -----------------------------------------------------
def resolve_role(value: RoleLike) -> Role:
    """
    Turn a raw session role into a Role.
    Raises UnknownRole for anything that is not mapped.
    """
    if isinstance(value, Role):
        role = value
    else:
        try:
            role = Role(value)
        except ValueError:
            raise UnknownRole(value)

    if role not in ROLE_RESOURCES:
        raise UnknownRole(value)
    return role


def is_known_role(value: RoleLike) -> bool:
    try:
        resolve_role(value)
    except UnknownRole:
        return False
    return True


# -----------------------------------------------------
# Resolver
# -----------------------------------------------------
def permitted_resources(role: RoleLike) -> Tuple[Resource, ...]:
    """
    Ordered panels a role may reach.
    Absent or unknown roles get an empty tuple; the caller applies policy.
    """
    if role is None:
        return ()
    try:
        return tuple(ROLE_RESOURCES[resolve_role(role)])
    except UnknownRole:
        return ()


def canonical_path(resource: Resource, role: RoleLike) -> str:
    """/{role}/{resource}"""
    role_slug = role.value if isinstance(role, Role) else str(role)
    return f"/{role_slug}/{Resource(resource).value}"


def permitted_paths(role: RoleLike) -> Tuple[str, ...]:
    return tuple(canonical_path(r, role) for r in permitted_resources(role))


def default_landing_path(role: RoleLike) -> str:
    """
    Canonical path of the first permitted panel.
    Raises NoAccessibleResource when the role has none.
    """
    paths = permitted_paths(role)
    if not paths:
        raise NoAccessibleResource(role)
    return paths[0]


def is_path_permitted(role: RoleLike, requested_path: Optional[str]) -> bool:
    """
    True iff requested_path starts with one of the role's canonical paths.
    Prefix match so panel sub-routes (e.g. /owner/revenue/summary) pass.
    """
    if not requested_path:
        return False
    return any(requested_path.startswith(path) for path in permitted_paths(role))
