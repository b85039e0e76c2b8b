# leadintake/data/services.py
from __future__ import annotations

from typing import List

from leadintake.schemas.content import Service

SERVICES: List[Service] = [
    Service(
        slug="full-bathroom-renovations",
        name="Full Bathroom Renovations",
        category="Bathroom Renovator",
        short_description="Complete bathroom transformations from design to completion",
        typical_duration="2-3 weeks",
        price_range="£5,000-£15,000",
        related_services=["wet-room-installations", "luxury-tiling-services", "structural-building-repairs"],
    ),
    Service(
        slug="wet-room-installations",
        name="Wet Room Installations",
        category="Bathroom Renovator",
        short_description="Modern, accessible wet rooms with expert waterproofing",
        typical_duration="1-2 weeks",
        price_range="£4,000-£10,000",
        related_services=["full-bathroom-renovations", "luxury-tiling-services", "disabled-assisted-bathrooms"],
    ),
    Service(
        slug="disabled-assisted-bathrooms",
        name="Accessible & Assisted Bathrooms",
        category="Bathroom Renovator",
        short_description="Accessible bathroom solutions with safety and dignity in mind",
        typical_duration="2-4 weeks",
        price_range="£6,000-£20,000",
        related_services=["wet-room-installations", "full-bathroom-renovations", "structural-building-repairs"],
    ),
    Service(
        slug="luxury-tiling-services",
        name="Luxury Tiling Services",
        category="Tile contractor",
        short_description="Premium tiling with 104 five-star reviews backing our craftsmanship",
        typical_duration="3-7 days",
        price_range="£2,000-£8,000",
        related_services=["full-bathroom-renovations", "wet-room-installations", "structural-building-repairs"],
    ),
    Service(
        slug="structural-building-repairs",
        name="Structural Building Repairs",
        category="General Contractor",
        short_description="Expert structural work including foundation and porch repairs",
        typical_duration="1-2 weeks",
        price_range="£3,000-£8,000",
        related_services=["full-bathroom-renovations", "wet-room-installations", "luxury-tiling-services"],
    ),
]
