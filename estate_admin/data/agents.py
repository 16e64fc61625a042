"""Default agent profiles, linked to the Agent-role seed users."""

from estate_admin.models.agent import Agent

_PROFILES = [
    {
        "id": "1",
        "user_id": "2",
        "name": "John Smith",
        "title": "Senior Property Consultant",
        "email": "john.smith@example.com",
        "phone": "+971 50 123 4567",
        "photo": "https://randomuser.me/api/portraits/men/1.jpg",
        "license_number": "BRN-10231",
        "license_expiry": "2026-12-31T00:00:00Z",
        "specializations": ["Luxury", "Residential", "Commercial"],
        "languages": ["English", "Arabic"],
        "experience": 8,
        "bio": "Experienced real estate agent specializing in luxury properties",
        "performance": {"average_rating": 4.8, "success_rate": 72},
        "created_at": "2023-01-15T00:00:00Z",
        "updated_at": "2023-06-20T00:00:00Z",
    },
    {
        "id": "2",
        "user_id": "3",
        "name": "Sarah Johnson",
        "title": "Off-Plan Specialist",
        "email": "sarah.johnson@example.com",
        "phone": "+971 50 987 6543",
        "photo": "https://randomuser.me/api/portraits/women/2.jpg",
        "license_number": "BRN-20877",
        "license_expiry": "2026-06-30T00:00:00Z",
        "specializations": ["Residential", "Off-Plan"],
        "languages": ["English", "French"],
        "experience": 10,
        "bio": "Dedicated agent with 10+ years of experience in Dubai real estate market",
        "performance": {"average_rating": 4.9, "success_rate": 81},
        "created_at": "2022-11-05T00:00:00Z",
        "updated_at": "2023-07-12T00:00:00Z",
    },
    {
        "id": "3",
        "user_id": "4",
        "name": "Mohammed Al-Rashid",
        "title": "Downtown Property Advisor",
        "email": "mohammed.rashid@builderbookings.com",
        "phone": "+971 55 444 7777",
        "photo": "https://randomuser.me/api/portraits/men/3.jpg",
        "license_number": "BRN-31190",
        "license_expiry": "2027-03-31T00:00:00Z",
        "specializations": ["Luxury", "International"],
        "languages": ["Arabic", "English", "Urdu"],
        "experience": 6,
        "bio": "Local expert specializing in premium properties in Downtown Dubai",
        "performance": {"average_rating": 4.7, "success_rate": 65},
        "created_at": "2022-08-18T00:00:00Z",
        "updated_at": "2023-05-30T00:00:00Z",
    },
]


def initial_agents() -> list[Agent]:
    return [Agent.model_validate(profile) for profile in _PROFILES]
