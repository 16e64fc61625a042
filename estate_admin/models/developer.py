"""Property developer models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from estate_admin.models.common import UtcDatetime


class DeveloperStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class DeveloperCreate(BaseModel):
    """Input for adding a developer. The slug is derived from the name."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Display name, also used on listings")
    description: str = ""
    logo: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    established_year: Optional[int] = None
    project_count: int = Field(default=0, ge=0)
    projects: list[str] = Field(default_factory=list, description="Project ids")
    featured: bool = False
    status: DeveloperStatus = DeveloperStatus.ACTIVE


class DeveloperUpdate(BaseModel):
    """Partial update for a developer."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    established_year: Optional[int] = None
    project_count: Optional[int] = Field(None, ge=0)
    featured: Optional[bool] = None
    status: Optional[DeveloperStatus] = None


class Developer(DeveloperCreate):
    """Stored developer."""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Numeric id as text")
    slug: str
    created_at: UtcDatetime
    updated_at: UtcDatetime
