"""Property listing models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from estate_admin.models.common import UtcDatetime


class PropertyCategory(str, Enum):
    """Listing categories used by the site sections."""
    VILLA = "Villa"
    SEMI = "Semi"
    TOWNHOUSE = "Townhouse"
    APARTMENT = "Apartment"
    PENTHOUSE = "Penthouse"


class PropertyStatus(str, Enum):
    """Sales status of a listing."""
    NOW_SELLING = "Now Selling"
    COMING_SOON = "Coming Soon"
    SOLD_OUT = "Sold Out"


class Coordinates(BaseModel):
    lat: float
    lng: float


class PropertyAgent(BaseModel):
    """Point-in-time copy of the listing agent's contact card."""
    name: str
    role: str
    phone: str
    email: str
    image: Optional[str] = None


class PropertyCreate(BaseModel):
    """Input for adding a property."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., description="Listing title")
    description: str = Field(default="", description="Listing description")
    price: float = Field(..., ge=0, description="Asking price, currency-agnostic")
    location: str = Field(..., description="Community or district")
    city: str = Field(default="Dubai", description="City or emirate")
    bedrooms: int = Field(default=0, ge=0)
    bathrooms: float = Field(default=0, ge=0)
    area: float = Field(default=0, ge=0, description="Area in square feet")
    type: str = Field(..., description="Display type, e.g. Apartment")
    category: PropertyCategory
    status: PropertyStatus = PropertyStatus.NOW_SELLING
    developer: str = Field(default="", description="Developer name (denormalized)")
    images: list[str] = Field(default_factory=list)
    image: Optional[str] = Field(None, description="Main image")
    amenities: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    coordinates: Optional[Coordinates] = None
    agent: Optional[PropertyAgent] = None
    address: Optional[str] = None
    year_built: Optional[int] = None
    is_featured: bool = False


class PropertyUpdate(BaseModel):
    """Partial update for a property. Creation time and view counters are not editable."""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    location: Optional[str] = None
    city: Optional[str] = None
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[float] = Field(None, ge=0)
    area: Optional[float] = Field(None, ge=0)
    type: Optional[str] = None
    category: Optional[PropertyCategory] = None
    status: Optional[PropertyStatus] = None
    developer: Optional[str] = None
    images: Optional[list[str]] = None
    image: Optional[str] = None
    amenities: Optional[list[str]] = None
    features: Optional[list[str]] = None
    coordinates: Optional[Coordinates] = None
    agent: Optional[PropertyAgent] = None
    address: Optional[str] = None
    year_built: Optional[int] = None
    is_featured: Optional[bool] = None


class Property(PropertyCreate):
    """Stored property listing."""
    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., description="Numeric listing ID")
    created_at: UtcDatetime
    view_count: int = Field(default=0, ge=0)
    last_viewed: Optional[UtcDatetime] = None


class PropertyFilters(BaseModel):
    """Search criteria for listings; unset fields do not filter."""
    type: Optional[str] = None
    category: Optional[PropertyCategory] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    bedrooms: Optional[int] = None
    location: Optional[str] = None
    featured: Optional[bool] = None
    developer: Optional[str] = None
    agent_name: Optional[str] = Field(None, description="Listing agent name, case-insensitive")


class PropertyPage(BaseModel):
    """One page of search results and the id to resume after."""
    properties: list[Property]
    last_visible: Optional[int] = Field(None, description="Id of the last listing on this page")
