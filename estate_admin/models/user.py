"""User account models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from estate_admin.models.common import UtcDatetime


class UserRole(str, Enum):
    """Back office roles."""
    SUPER_ADMIN = "Super Admin"
    AGENT = "Agent"
    EDITOR = "Editor"
    VIEWER = "Viewer"


class UserStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


ALL_PERMISSIONS = "all"

ROLE_PERMISSIONS: dict[UserRole, tuple[str, ...]] = {
    UserRole.SUPER_ADMIN: (ALL_PERMISSIONS,),
    UserRole.AGENT: ("view_properties", "edit_properties", "view_clients"),
    UserRole.EDITOR: ("view_properties", "edit_properties"),
    UserRole.VIEWER: ("view_properties",),
}


def permissions_for(role: UserRole) -> list[str]:
    """Canonical permission set for a role."""
    return list(ROLE_PERMISSIONS[UserRole(role)])


class UserCreate(BaseModel):
    """Input for creating a user. Permissions always follow the role."""
    model_config = ConfigDict(extra="forbid")

    name: str
    email: str
    role: UserRole
    status: UserStatus = UserStatus.ACTIVE
    avatar: Optional[str] = None


class UserUpdate(BaseModel):
    """Partial update for a user."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None
    avatar: Optional[str] = None


class User(BaseModel):
    """Stored user account."""
    id: str = Field(..., description="User ID (text)")
    name: str
    email: str
    role: UserRole
    status: UserStatus = UserStatus.ACTIVE
    permissions: list[str] = Field(default_factory=list, description="Derived from role")
    avatar: Optional[str] = None
    created_at: UtcDatetime
    last_login: Optional[UtcDatetime] = Field(None, description="None until the first login")
