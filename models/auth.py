from typing import List, Optional

from pydantic import BaseModel


# -----------------------------------------------------
# SESSION (the identity held in the "user" cookie)
# -----------------------------------------------------
class Session(BaseModel):
    user_id: str
    username: str
    role: str                           # raw value; may be unrecognized
    location_id: Optional[str] = None


# -----------------------------------------------------
# LOGIN REQUEST (checked against the users table)
# -----------------------------------------------------
class LoginRequest(BaseModel):
    username: str
    password: str


# -----------------------------------------------------
# LOGIN RESPONSE
# -----------------------------------------------------
class LoginResponse(BaseModel):
    session: Session
    landing_path: Optional[str] = None  # None when the role has no panels


# -----------------------------------------------------
# CHOOSE-ROLE OPTIONS
# -----------------------------------------------------
class RoleOption(BaseModel):
    role: str
    display_name: str


# -----------------------------------------------------
# NAVIGATION
# -----------------------------------------------------
class NavigationItem(BaseModel):
    resource: str
    label: str
    path: str
    active: bool = False


class NavigationResponse(BaseModel):
    role: Optional[str] = None
    items: List[NavigationItem] = []
