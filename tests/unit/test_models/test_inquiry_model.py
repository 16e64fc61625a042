"""Tests for Inquiry models."""

import pytest
from pydantic import ValidationError
from estate_admin.models.inquiry import Inquiry, InquiryCreate, InquiryStatus
from tests.utils.factories import create_inquiry_data


@pytest.mark.unit
def test_inquiry_create_from_factory():
    data = InquiryCreate(**create_inquiry_data(property_id="7", title="Dubai Hills Apartment"))

    assert data.property_id == "7"
    assert data.property_snapshot.title == "Dubai Hills Apartment"


@pytest.mark.unit
def test_inquiry_create_requires_snapshot():
    data = create_inquiry_data()
    del data["property_snapshot"]

    with pytest.raises(ValidationError):
        InquiryCreate(**data)


@pytest.mark.unit
def test_inquiry_status_values():
    assert [s.value for s in InquiryStatus] == ["New", "In Progress", "Resolved", "Cancelled"]


@pytest.mark.unit
def test_stored_inquiry_revives_history():
    """Test that nested note and history timestamps validate."""
    inquiry = Inquiry.model_validate({
        **create_inquiry_data(),
        "id": "inq-1",
        "status": "In Progress",
        "notes": [{"id": "n1", "content": "Called", "created_at": "2024-02-01T09:00:00Z", "created_by": "admin"}],
        "status_history": [
            {"status": "New", "changed_at": "2024-02-01T08:00:00Z", "changed_by": "system"},
            {"status": "In Progress", "changed_at": "2024-02-01T09:00:00Z", "changed_by": "admin"},
        ],
        "created_at": "2024-02-01T08:00:00Z",
        "updated_at": "2024-02-01T09:00:00Z",
    })

    assert inquiry.status == InquiryStatus.IN_PROGRESS
    assert inquiry.notes[0].created_at.hour == 9
    assert inquiry.status_history[0].changed_at < inquiry.status_history[1].changed_at
