"""Inquiry models - buyer contact requests with an append-only audit trail."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from estate_admin.models.common import UtcDatetime


class InquiryStatus(str, Enum):
    NEW = "New"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    CANCELLED = "Cancelled"


class PropertySnapshot(BaseModel):
    """Listing details as they were when the inquiry was submitted."""
    id: str
    title: str
    price: float
    location: str
    main_image: Optional[str] = None


class InquiryNote(BaseModel):
    id: str
    content: str
    created_at: UtcDatetime
    created_by: str


class StatusHistoryEntry(BaseModel):
    status: InquiryStatus
    changed_at: UtcDatetime
    changed_by: str


class InquiryCreate(BaseModel):
    """Input captured from the inquiry form."""
    model_config = ConfigDict(extra="forbid")

    property_id: str
    property_snapshot: PropertySnapshot
    name: str
    email: str
    phone: Optional[str] = None
    message: str


class Inquiry(BaseModel):
    """Stored inquiry."""
    id: str = Field(..., description="Inquiry ID (text)")
    property_id: str
    property_snapshot: PropertySnapshot
    name: str
    email: str
    phone: Optional[str] = None
    message: str
    status: InquiryStatus = InquiryStatus.NEW
    notes: list[InquiryNote] = Field(default_factory=list)
    status_history: list[StatusHistoryEntry] = Field(default_factory=list)
    created_at: UtcDatetime
    updated_at: UtcDatetime
