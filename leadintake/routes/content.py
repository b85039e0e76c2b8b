# leadintake/routes/content.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query

from leadintake.core.exceptions import NotFoundError
from leadintake.schemas.content import (
    GalleryCategory,
    GalleryImage,
    GalleryStats,
    Location,
    Review,
    ReviewSort,
    ReviewSummary,
    Service,
    Zone,
)
from leadintake.services import catalogue

router = APIRouter()


@router.get("/services", response_model=List[Service])
async def list_services(category: Optional[str] = None) -> List[Service]:
    if category:
        return catalogue.get_services_by_category(category)
    return list(catalogue.SERVICES)


@router.get("/services/{slug}", response_model=Service)
async def get_service(slug: str) -> Service:
    service = catalogue.get_service_by_slug(slug)
    if service is None:
        raise NotFoundError(f"Service '{slug}' not found", code="service_not_found")
    return service


@router.get("/services/{slug}/related", response_model=List[Service])
async def get_related(slug: str) -> List[Service]:
    if catalogue.get_service_by_slug(slug) is None:
        raise NotFoundError(f"Service '{slug}' not found", code="service_not_found")
    return catalogue.get_related_services(slug)


@router.get("/locations", response_model=List[Location])
async def list_locations(zone: Optional[Zone] = None) -> List[Location]:
    if zone is not None:
        return catalogue.get_locations_by_zone(zone)
    return list(catalogue.LOCATIONS)


@router.get("/locations/{slug}", response_model=Location)
async def get_location(slug: str) -> Location:
    location = catalogue.get_location_by_slug(slug)
    if location is None:
        raise NotFoundError(f"Location '{slug}' not found", code="location_not_found")
    return location


@router.get("/gallery", response_model=List[GalleryImage])
async def list_gallery(
    category: Optional[GalleryCategory] = None,
    location: Optional[str] = Query(default=None, min_length=1, max_length=100),
    service: Optional[str] = Query(default=None, min_length=1, max_length=100),
    priority: bool = False,
) -> List[GalleryImage]:
    images = list(catalogue.GALLERY_IMAGES)
    if category is not None:
        images = catalogue.get_images_by_category(category, images)
    if location:
        images = catalogue.get_images_by_location(location, images)
    if service:
        images = catalogue.get_images_by_service(service, images)
    if priority:
        images = catalogue.get_priority_images(images)
    return images


@router.get("/gallery/stats", response_model=GalleryStats)
async def get_gallery_stats() -> GalleryStats:
    return catalogue.gallery_stats()


@router.get("/reviews", response_model=List[Review])
async def list_reviews(
    postcode: str = Query(default=catalogue.ALL, max_length=10),
    service: str = Query(default=catalogue.ALL, max_length=50),
    sort: ReviewSort = ReviewSort.NEWEST,
) -> List[Review]:
    return catalogue.filter_reviews(postcode=postcode, service=service, sort=sort.value)


@router.get("/reviews/summary", response_model=ReviewSummary)
async def get_review_summary() -> ReviewSummary:
    return ReviewSummary(
        aggregate=catalogue.aggregate_rating(),
        filters=catalogue.review_filter_options(),
    )
