# ============================================
# CENTRALIZED ROLE → PANELS MAP
# ============================================
# Navigation and the route guard both read from here.
# Order matters: the first panel is the role's landing page.

from models.enums import Role, Resource


MAPPING_VERSION = 1


# Navigation text for each panel
RESOURCE_LABELS = {
    Resource.table_reservation: "Table Reservation",
    Resource.product_inventory: "Product & Inventory",
    Resource.revenue: "Revenue",
    Resource.users: "Users",
    Resource.employees: "Employees",
    Resource.table_status: "Table Status",
    Resource.ordered_item: "Ordered Items",
}


ROLE_RESOURCES = {

    # =====================================================
    # MANAGER: floor + revenue, no people admin
    # =====================================================
    Role.manager: (
        Resource.table_reservation,
        Resource.product_inventory,
        Resource.revenue,
        Resource.table_status,
        Resource.ordered_item,
    ),

    # =====================================================
    # STAFF: front of house
    # =====================================================
    Role.staff: (
        Resource.table_reservation,
        Resource.product_inventory,
        Resource.table_status,
    ),

    # =====================================================
    # KITCHEN
    # =====================================================
    Role.kitchen: (
        Resource.product_inventory,
        Resource.ordered_item,
    ),

    # =====================================================
    # OWNER: everything but the kitchen ticket view
    # =====================================================
    Role.owner: (
        Resource.employees,
        Resource.table_reservation,
        Resource.users,
        Resource.product_inventory,
        Resource.revenue,
        Resource.table_status,
    ),

    # =====================================================
    # SYSTEM ADMIN
    # =====================================================
    Role.admin: (
        Resource.employees,
        Resource.table_reservation,
        Resource.users,
        Resource.product_inventory,
        Resource.revenue,
    ),
}


# Positions offered on the login "choose your position" screen
SELECTABLE_ROLES = {
    Role.manager: "Manager",
    Role.staff: "Staff",
    Role.kitchen: "Kitchen Staff",
}
