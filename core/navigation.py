# core/navigation.py

from typing import List, Optional

from core.permission_helpers import canonical_path, permitted_resources
from core.permissions import RESOURCE_LABELS
from models.auth import NavigationItem, Session


def build_navigation(session: Optional[Session], current_path: Optional[str] = None) -> List[NavigationItem]:
    """
    Left-panel entries for the session's role, in mapping order.
    No session (or an unmapped role) renders no navigation.
    """
    if session is None:
        return []

    items = []
    for resource in permitted_resources(session.role):
        path = canonical_path(resource, session.role)
        items.append(
            NavigationItem(
                resource=resource.value,
                label=RESOURCE_LABELS.get(resource, resource.value),
                path=path,
                active=current_path == path,
            )
        )
    return items
