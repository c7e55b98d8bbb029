from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# ROLE
# -----------------------------------------------------
class Role(BaseStrEnum):
    """Access class of an authenticated back-office user."""

    manager = "manager"
    staff = "staff"
    kitchen = "kitchen"
    owner = "owner"
    admin = "admin"


# -----------------------------------------------------
# RESOURCE (navigable panel)
# -----------------------------------------------------
class Resource(BaseStrEnum):
    """Dashboard panels. The value is the URL slug under /{role}/."""

    table_reservation = "table-reservation"
    product_inventory = "product-inventory"
    revenue = "revenue"
    users = "users"
    employees = "employees"
    table_status = "table-status"
    ordered_item = "ordered-item"


# -----------------------------------------------------
# ROUTE GUARD STATE
# -----------------------------------------------------
class GuardState(BaseStrEnum):
    """Outcome of a single guard evaluation."""

    authorized = "authorized"
    redirecting = "redirecting"
    denied = "denied"


# -----------------------------------------------------
# UNKNOWN ROLE POLICY
# -----------------------------------------------------
class UnknownRolePolicy(BaseStrEnum):
    """What the guard does with a session whose role is not mapped."""

    allow = "allow"
    deny = "deny"


# -----------------------------------------------------
# REVENUE DATE RANGE
# -----------------------------------------------------
class DateRange(BaseStrEnum):
    """Revenue dashboard look-back windows."""

    last_7_days = "7d"
    last_14_days = "14d"
    last_30_days = "30d"

    @property
    def days(self) -> int:
        return int(self.value[:-1])
