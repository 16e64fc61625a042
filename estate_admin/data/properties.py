"""Default listings written to an empty property store."""

from estate_admin.models.property import Property

PLACEHOLDER_IMAGE = "/images/property-placeholder.jpg"

_LISTINGS = [
    {
        "id": 1, "title": "Luxury Apartment", "type": "Apartment", "category": "Apartment",
        "status": "Now Selling", "price": 1500000, "location": "Dubai Marina",
        "bedrooms": 2, "bathrooms": 2, "area": 1200, "developer": "Emaar Properties",
        "year_built": 2023, "created_at": "2024-01-01T00:00:00Z",
        "description": "Luxury apartment with stunning views",
        "image": "/images/properties/apartment1.jpg",
        "coordinates": {"lat": 25.080406, "lng": 55.143360},
    },
    {
        "id": 2, "title": "Beachfront Villa", "type": "Villa", "category": "Villa",
        "status": "Coming Soon", "price": 3500000, "location": "Palm Jumeirah",
        "bedrooms": 4, "bathrooms": 3, "area": 2500, "developer": "Nakheel",
        "year_built": 2023, "created_at": "2024-01-02T00:00:00Z",
        "description": "Beautiful beachfront villa",
        "image": "/images/properties/villa1.jpg",
        "coordinates": {"lat": 25.112047, "lng": 55.138580},
    },
    {
        "id": 3, "title": "Penthouse Suite", "type": "Apartment", "category": "Penthouse",
        "status": "Sold Out", "price": 4200000, "location": "Downtown Dubai",
        "bedrooms": 3, "bathrooms": 3, "area": 4200, "developer": "Emaar Properties",
        "year_built": 2023, "created_at": "2024-01-03T00:00:00Z",
        "description": "Penthouse with Burj Khalifa views",
        "coordinates": {"lat": 25.197197, "lng": 55.274376},
    },
    {
        "id": 4, "title": "Marina View Apartment", "type": "Apartment", "category": "Apartment",
        "status": "Now Selling", "price": 1800000, "location": "Dubai Marina",
        "bedrooms": 2, "bathrooms": 2, "area": 1400, "developer": "Select Group",
        "year_built": 2024, "created_at": "2024-01-04T00:00:00Z",
        "description": "Waterfront apartment overlooking the marina",
        "coordinates": {"lat": 25.079250, "lng": 55.140100},
    },
    {
        "id": 5, "title": "Business Bay Apartment", "type": "Apartment", "category": "Apartment",
        "status": "Coming Soon", "price": 2200000, "location": "Business Bay",
        "bedrooms": 3, "bathrooms": 2, "area": 1800, "developer": "Damac Properties",
        "year_built": 2024, "created_at": "2024-01-05T00:00:00Z",
        "description": "Canal-facing apartment in Business Bay",
        "coordinates": {"lat": 25.186500, "lng": 55.266600},
    },
    {
        "id": 6, "title": "JBR Beach Apartment", "type": "Apartment", "category": "Apartment",
        "status": "Now Selling", "price": 1900000, "location": "Jumeirah Beach Residence",
        "bedrooms": 2, "bathrooms": 2, "area": 1300, "developer": "Select Group",
        "year_built": 2023, "created_at": "2024-01-06T00:00:00Z",
        "description": "Beach-side living at JBR",
        "coordinates": {"lat": 25.078000, "lng": 55.133000},
    },
    {
        "id": 7, "title": "Dubai Hills Apartment", "type": "Apartment", "category": "Apartment",
        "status": "Coming Soon", "price": 1600000, "location": "Dubai Hills Estate",
        "bedrooms": 2, "bathrooms": 2, "area": 1200, "developer": "Emaar Properties",
        "year_built": 2024, "created_at": "2024-01-07T00:00:00Z",
        "description": "Park-view apartment in Dubai Hills",
        "coordinates": {"lat": 25.110000, "lng": 55.245000},
    },
    {
        "id": 8, "title": "Emirates Hills Villa", "type": "Villa", "category": "Villa",
        "status": "Now Selling", "price": 4500000, "location": "Emirates Hills",
        "bedrooms": 5, "bathrooms": 4, "area": 3500, "developer": "Emaar Properties",
        "year_built": 2022, "created_at": "2024-01-08T00:00:00Z",
        "description": "Golf course villa in Emirates Hills",
        "coordinates": {"lat": 25.067000, "lng": 55.166000},
    },
    {
        "id": 9, "title": "Arabian Ranches Villa", "type": "Villa", "category": "Villa",
        "status": "Coming Soon", "price": 3800000, "location": "Arabian Ranches",
        "bedrooms": 4, "bathrooms": 3, "area": 2800, "developer": "Emaar Properties",
        "year_built": 2024, "created_at": "2024-01-09T00:00:00Z",
        "description": "Family villa in Arabian Ranches",
        "coordinates": {"lat": 25.055000, "lng": 55.270000},
    },
    {
        "id": 10, "title": "Dubai Hills Townhouse", "type": "Townhouse", "category": "Townhouse",
        "status": "Now Selling", "price": 2800000, "location": "Dubai Hills Estate",
        "bedrooms": 3, "bathrooms": 2, "area": 2200, "developer": "Emaar Properties",
        "year_built": 2024, "created_at": "2024-01-10T00:00:00Z",
        "description": "Modern townhouse near Dubai Hills Park",
        "coordinates": {"lat": 25.112000, "lng": 55.250000},
    },
    {
        "id": 11, "title": "Mudon Townhouse", "type": "Townhouse", "category": "Townhouse",
        "status": "Coming Soon", "price": 2500000, "location": "Mudon",
        "bedrooms": 3, "bathrooms": 2, "area": 2000, "developer": "Meraas",
        "year_built": 2024, "created_at": "2024-01-11T00:00:00Z",
        "description": "Contemporary townhouse in Mudon community",
        "coordinates": {"lat": 25.097197, "lng": 55.174376},
    },
]


def initial_properties() -> list[Property]:
    """Fresh copies of the default listings."""
    properties = []
    for listing in _LISTINGS:
        image = listing.get("image", PLACEHOLDER_IMAGE)
        properties.append(Property.model_validate({
            "city": "Dubai",
            "is_featured": True,
            "image": image,
            "images": [image],
            **listing,
        }))
    return properties
