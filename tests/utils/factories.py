"""Test data factories using Faker."""

from faker import Faker
from typing import Optional
from datetime import date, timedelta

fake = Faker()


def create_property_data(category: str = "Apartment", price: Optional[float] = None, **overrides) -> dict:
    """Create input data for PropertyRepository.add."""
    data = {
        "title": f"{fake.street_name()} {category}",
        "description": fake.sentence(nb_words=10),
        "price": price if price is not None else fake.random_int(min=500000, max=9000000),
        "location": fake.city(),
        "city": "Dubai",
        "bedrooms": fake.random_int(min=1, max=6),
        "bathrooms": fake.random_int(min=1, max=5),
        "area": fake.random_int(min=600, max=6000),
        "type": category,
        "category": category,
        "status": "Now Selling",
        "developer": fake.company(),
        "images": [fake.image_url()],
        "coordinates": {"lat": float(fake.latitude()), "lng": float(fake.longitude())},
        "agent": {
            "name": fake.name(),
            "role": "Sales Agent",
            "phone": fake.phone_number(),
            "email": fake.email(),
            "image": fake.image_url(),
        },
        "is_featured": False,
    }
    data.update(overrides)
    return data


def create_user_data(role: str = "Agent", **overrides) -> dict:
    """Create input data for UserRepository.create."""
    data = {
        "name": fake.name(),
        "email": fake.email(),
        "role": role,
    }
    data.update(overrides)
    return data


def create_agent_data(user_id: str, **overrides) -> dict:
    """Create input data for AgentRepository.create."""
    data = {
        "user_id": user_id,
        "name": fake.name(),
        "title": "Property Consultant",
        "email": fake.email(),
        "phone": fake.phone_number(),
        "license_number": f"BRN-{fake.random_int(min=10000, max=99999)}",
        "license_expiry": (date.today() + timedelta(days=365)).isoformat(),
        "specializations": ["Residential"],
        "languages": ["English"],
        "experience": fake.random_int(min=1, max=20),
        "bio": fake.sentence(nb_words=12),
    }
    data.update(overrides)
    return data


def create_inquiry_data(property_id: str = "1", title: str = "Luxury Apartment", **overrides) -> dict:
    """Create input data for InquiryRepository.create."""
    data = {
        "property_id": property_id,
        "property_snapshot": {
            "id": property_id,
            "title": title,
            "price": fake.random_int(min=500000, max=9000000),
            "location": fake.city(),
            "main_image": fake.image_url(),
        },
        "name": fake.name(),
        "email": fake.email(),
        "phone": fake.phone_number(),
        "message": fake.sentence(nb_words=8),
    }
    data.update(overrides)
    return data


def create_developer_data(name: Optional[str] = None, **overrides) -> dict:
    """Create input data for DeveloperRepository.add."""
    data = {
        "name": name or fake.company(),
        "description": fake.sentence(nb_words=12),
        "logo": fake.image_url(),
        "website": fake.url(),
        "email": fake.company_email(),
        "phone": fake.phone_number(),
        "address": "Dubai, UAE",
        "established_year": fake.random_int(min=1970, max=2020),
        "project_count": fake.random_int(min=1, max=40),
    }
    data.update(overrides)
    return data
