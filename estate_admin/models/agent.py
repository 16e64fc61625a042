"""Agent profile models."""

from datetime import date
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from estate_admin.models.common import UtcDatetime


class AgentSpecialization(str, Enum):
    LUXURY = "Luxury"
    COMMERCIAL = "Commercial"
    RESIDENTIAL = "Residential"
    OFF_PLAN = "Off-Plan"
    INTERNATIONAL = "International"


class AgentLanguage(str, Enum):
    ENGLISH = "English"
    ARABIC = "Arabic"
    HINDI = "Hindi"
    URDU = "Urdu"
    FRENCH = "French"
    CHINESE = "Chinese"
    RUSSIAN = "Russian"


class AgentStatus(str, Enum):
    ACTIVE = "Active"
    ON_LEAVE = "On Leave"
    INACTIVE = "Inactive"


Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

BUSINESS_DAYS: list[Weekday] = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]


class AgentCertification(BaseModel):
    name: str
    issuer: str
    date_obtained: UtcDatetime
    expiry_date: Optional[UtcDatetime] = None
    verification_id: Optional[str] = None


class AgentDocument(BaseModel):
    type: str
    name: str
    url: str
    upload_date: UtcDatetime
    expiry_date: Optional[UtcDatetime] = None


class MonthlyStat(BaseModel):
    """Per-month sales breakdown keyed by "YYYY-MM"."""
    month: str = Field(..., pattern=r"^\d{4}-\d{2}$")
    sales_count: int = 0
    sales_value: float = 0
    new_listings: int = 0


class AgentPerformance(BaseModel):
    total_listings: int = 0
    active_listings: int = 0
    sold_properties: int = 0
    total_sales_value: float = 0
    average_rating: float = 0
    response_time: float = Field(default=0, description="Average response time in hours")
    success_rate: float = Field(default=0, description="Percentage")
    monthly_stats: list[MonthlyStat] = Field(default_factory=list)


class PerformanceUpdate(BaseModel):
    """Fields of the performance block that may be set directly.

    Listing and sales counters are owned by the assignment and transaction
    operations and are rejected here.
    """
    model_config = ConfigDict(extra="forbid")

    average_rating: Optional[float] = Field(None, ge=0, le=5)
    response_time: Optional[float] = Field(None, ge=0)
    success_rate: Optional[float] = Field(None, ge=0, le=100)


class Transaction(BaseModel):
    property_id: str
    transaction_date: date
    transaction_type: Literal["Sale", "Lease"] = "Sale"
    value: float = Field(..., ge=0)


class AgentPortfolio(BaseModel):
    featured_listings: list[str] = Field(default_factory=list)
    past_transactions: list[Transaction] = Field(default_factory=list)
    special_achievements: list[str] = Field(default_factory=list)


class AgentSocialMedia(BaseModel):
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None


class AvailableHours(BaseModel):
    start: str = Field(default="09:00", pattern=r"^\d{2}:\d{2}$")
    end: str = Field(default="18:00", pattern=r"^\d{2}:\d{2}$")


class OutOfOffice(BaseModel):
    start_date: UtcDatetime
    end_date: UtcDatetime
    reason: str


class AgentSchedule(BaseModel):
    available_days: list[Weekday] = Field(default_factory=lambda: list(BUSINESS_DAYS))
    available_hours: AvailableHours = Field(default_factory=AvailableHours)
    out_of_office: Optional[OutOfOffice] = None


class ScheduleUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    available_days: Optional[list[Weekday]] = None
    available_hours: Optional[AvailableHours] = None
    out_of_office: Optional[OutOfOffice] = None


class AgentCreate(BaseModel):
    """Input for creating an agent profile for an existing Agent-role user."""
    model_config = ConfigDict(extra="forbid")

    user_id: str
    name: str
    title: str
    email: str
    phone: str
    photo: Optional[str] = None
    license_number: str
    license_expiry: UtcDatetime
    specializations: list[AgentSpecialization] = Field(default_factory=list)
    languages: list[AgentLanguage] = Field(default_factory=list)
    experience: int = Field(default=0, ge=0, description="Years of experience")
    bio: str = ""


class AgentUpdate(BaseModel):
    """Partial profile update. Performance, portfolio and assignments are not editable here."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    title: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    photo: Optional[str] = None
    license_number: Optional[str] = None
    license_expiry: Optional[UtcDatetime] = None
    specializations: Optional[list[AgentSpecialization]] = None
    languages: Optional[list[AgentLanguage]] = None
    experience: Optional[int] = Field(None, ge=0)
    bio: Optional[str] = None
    status: Optional[AgentStatus] = None
    social_media: Optional[AgentSocialMedia] = None


class Agent(BaseModel):
    """Stored agent profile."""
    id: str = Field(..., description="Agent ID (text)")
    user_id: str = Field(..., description="User account ID (text FK)")
    name: str
    title: str
    email: str
    phone: str
    photo: Optional[str] = None
    license_number: str
    license_expiry: UtcDatetime
    specializations: list[AgentSpecialization] = Field(default_factory=list)
    languages: list[AgentLanguage] = Field(default_factory=list)
    experience: int = 0
    bio: str = ""
    status: AgentStatus = AgentStatus.ACTIVE
    certifications: list[AgentCertification] = Field(default_factory=list)
    performance: AgentPerformance = Field(default_factory=AgentPerformance)
    social_media: AgentSocialMedia = Field(default_factory=AgentSocialMedia)
    portfolio: AgentPortfolio = Field(default_factory=AgentPortfolio)
    assigned_properties: list[str] = Field(default_factory=list)
    schedule: AgentSchedule = Field(default_factory=AgentSchedule)
    documents: list[AgentDocument] = Field(default_factory=list)
    created_at: UtcDatetime
    updated_at: UtcDatetime
