# leadintake/data/__init__.py
"""
Static site content: service catalogue, service-area locations, gallery and reviews.
"""

from leadintake.data.gallery import GALLERY_IMAGES
from leadintake.data.locations import LOCATIONS
from leadintake.data.reviews import REVIEWS
from leadintake.data.services import SERVICES

__all__ = [
    "GALLERY_IMAGES",
    "LOCATIONS",
    "REVIEWS",
    "SERVICES",
]
