# leadintake/schemas/content.py
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Zone(str, Enum):
    GOLD = "gold"
    RENOVATION = "renovation"
    VILLAGE = "village"
    FOUNDATION = "foundation"


class GalleryCategory(str, Enum):
    SHOWROOM = "Showroom"
    TRUST = "Trust"
    TRANSFORMATION = "Transformation"
    CRAFTSMANSHIP = "Craftsmanship"


class ReviewSort(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    HIGHEST = "highest"


class Service(BaseModel):
    slug: str
    name: str
    category: str
    short_description: str
    typical_duration: str
    price_range: str
    related_services: List[str] = Field(default_factory=list)


class Coordinates(BaseModel):
    lat: float
    lng: float


class Location(BaseModel):
    slug: str
    name: str
    postcode: str
    zone: Zone
    region: str
    highlight_service: Optional[str] = None
    coordinates: Coordinates
    nearby: List[str] = Field(default_factory=list)


class GalleryImage(BaseModel):
    id: str
    src: str
    alt: str
    category: GalleryCategory
    location: Optional[str] = None
    service: Optional[str] = None
    width: int
    height: int
    priority: bool = False


class GalleryStats(BaseModel):
    total_images: int
    by_category: Dict[str, int]


class Review(BaseModel):
    id: str
    author: str
    rating: float = Field(ge=1, le=10)
    text: str
    location: str
    postcode: str
    date: date
    verified: bool = False
    service: Optional[str] = None


class AggregateRating(BaseModel):
    rating_value: float
    review_count: int
    best_rating: int = 10
    worst_rating: int = 1


class ReviewFilterOptions(BaseModel):
    postcodes: List[str]
    services: List[str]


class ReviewSummary(BaseModel):
    aggregate: AggregateRating
    filters: ReviewFilterOptions
