"""Default inquiries for a fresh back office."""

from estate_admin.models.inquiry import InquiryCreate

DEFAULT_INQUIRIES = [
    {
        "property_id": "1",
        "property_snapshot": {
            "id": "1",
            "title": "Luxury Apartment",
            "price": 1500000,
            "location": "Dubai Marina",
            "main_image": "/images/properties/apartment1.jpg",
        },
        "name": "John Doe",
        "email": "john@example.com",
        "phone": "+1234567890",
        "message": "I am interested in viewing this property.",
    },
]


def default_inquiry_inputs() -> list[InquiryCreate]:
    return [InquiryCreate.model_validate(item) for item in DEFAULT_INQUIRIES]
