"""Default developers."""

from estate_admin.models.developer import Developer

_DEVELOPERS = [
    ("1", "Emaar Properties", "emaar-properties", "emaar", 42, 1997,
     "One of the largest real estate developers in the UAE known for iconic projects like Burj Khalifa and Dubai Mall."),
    ("2", "Nakheel", "nakheel", "nakheel", 35, 2000,
     "Developer behind Palm Jumeirah and other iconic Dubai landmarks and waterfront projects."),
    ("3", "Dubai Properties", "dubai-properties", "dubai-properties", 28, 2004,
     "Leading developer of unique destinations and communities across Dubai."),
    ("4", "Damac Properties", "damac-properties", "damac", 33, 2002,
     "Luxury developer known for partnerships with fashion brands like Versace and Cavalli."),
    ("5", "Meraas", "meraas", "meraas", 20, 2007,
     "Developer focused on creating unique experiences through lifestyle destinations."),
    ("6", "Sobha Realty", "sobha-realty", "sobha", 15, 1976,
     "Premium developer known for high-quality craftsmanship and attention to detail."),
    ("7", "Select Group", "select-group", "select-group", 12, 2002,
     "Developer specializing in premium high-rise residential, commercial, and mixed-use developments."),
    ("8", "Azizi Developments", "azizi-developments", "azizi", 24, 2007,
     "Fast-growing developer with a diverse portfolio of residential and commercial properties."),
]

# Emaar and Nakheel are the featured partners on the site
_FEATURED = {"1", "2"}


def initial_developers() -> list[Developer]:
    return [
        Developer.model_validate({
            "id": developer_id,
            "name": name,
            "slug": slug,
            "description": description,
            "logo": f"/images/developers/{logo}.png",
            "project_count": project_count,
            "established_year": established_year,
            "featured": developer_id in _FEATURED,
            "status": "active",
            "created_at": "2023-01-01T00:00:00Z",
            "updated_at": "2023-01-01T00:00:00Z",
        })
        for developer_id, name, slug, logo, project_count, established_year, description in _DEVELOPERS
    ]
