# leadintake/services/catalogue.py
"""Lookups and filters over the static site content."""
from __future__ import annotations

from typing import List, Optional, Sequence

from leadintake.data import GALLERY_IMAGES, LOCATIONS, REVIEWS, SERVICES
from leadintake.schemas.content import (
    AggregateRating,
    GalleryCategory,
    GalleryImage,
    GalleryStats,
    Location,
    Review,
    ReviewFilterOptions,
    ReviewSort,
    Service,
    Zone,
)

ALL = "all"
OTHER = "Other"

# Checked in order; the first keyword found in a review's service wins.
SERVICE_GROUPS = [
    ("Bathroom", ("bathroom",)),
    ("Wet Room", ("wet room",)),
    ("Tiling", ("tiling", "tiles")),
    ("Extension", ("extension",)),
    ("Kitchen", ("kitchen",)),
    ("Plumbing", ("plumbing",)),
    ("Painting", ("painting",)),
]


# Services

def get_service_by_slug(slug: str, services: Sequence[Service] = SERVICES) -> Optional[Service]:
    return next((service for service in services if service.slug == slug), None)


def get_services_by_category(category: str, services: Sequence[Service] = SERVICES) -> List[Service]:
    return [service for service in services if service.category == category]


def get_related_services(slug: str, services: Sequence[Service] = SERVICES) -> List[Service]:
    """Resolve a service's related slugs, skipping any that no longer exist."""
    service = get_service_by_slug(slug, services)
    if service is None:
        return []
    related = (get_service_by_slug(related_slug, services) for related_slug in service.related_services)
    return [item for item in related if item is not None]


# Locations

def get_location_by_slug(slug: str, locations: Sequence[Location] = LOCATIONS) -> Optional[Location]:
    return next((location for location in locations if location.slug == slug), None)


def get_locations_by_zone(zone: Zone, locations: Sequence[Location] = LOCATIONS) -> List[Location]:
    return [location for location in locations if location.zone == zone]


# Gallery

def get_images_by_category(category: GalleryCategory, images: Sequence[GalleryImage] = GALLERY_IMAGES) -> List[GalleryImage]:
    return [image for image in images if image.category == category]


def get_images_by_location(location: str, images: Sequence[GalleryImage] = GALLERY_IMAGES) -> List[GalleryImage]:
    needle = location.lower()
    return [image for image in images if image.location and needle in image.location.lower()]


def get_images_by_service(service: str, images: Sequence[GalleryImage] = GALLERY_IMAGES) -> List[GalleryImage]:
    needle = service.lower()
    return [image for image in images if image.service and needle in image.service.lower()]


def get_priority_images(images: Sequence[GalleryImage] = GALLERY_IMAGES) -> List[GalleryImage]:
    return [image for image in images if image.priority]


def gallery_stats(images: Sequence[GalleryImage] = GALLERY_IMAGES) -> GalleryStats:
    return GalleryStats(
        total_images=len(images),
        by_category={
            category.value: len(get_images_by_category(category, images))
            for category in GalleryCategory
        },
    )


# Reviews

def service_group(service: Optional[str]) -> Optional[str]:
    """Map a free-text service description onto one of the review filter groups."""
    if not service:
        return None
    lowered = service.lower()
    for group, keywords in SERVICE_GROUPS:
        if any(keyword in lowered for keyword in keywords):
            return group
    return OTHER


def _matches_service(review: Review, service_filter: str) -> bool:
    if not review.service:
        return False
    if service_filter.lower() == OTHER.lower():
        return service_group(review.service) == OTHER
    lowered = review.service.lower()
    wanted = service_filter.lower()
    for group, keywords in SERVICE_GROUPS:
        if group.lower() == wanted:
            return any(keyword in lowered for keyword in keywords)
    return True


def filter_reviews(
    reviews: Sequence[Review] = REVIEWS,
    postcode: str = ALL,
    service: str = ALL,
    sort: str = ReviewSort.NEWEST.value,
) -> List[Review]:
    filtered = list(reviews)

    if postcode != ALL:
        filtered = [review for review in filtered if review.postcode == postcode]

    if service != ALL:
        filtered = [review for review in filtered if _matches_service(review, service)]

    if sort == ReviewSort.NEWEST.value:
        return sorted(filtered, key=lambda review: review.date, reverse=True)
    if sort == ReviewSort.OLDEST.value:
        return sorted(filtered, key=lambda review: review.date)
    if sort == ReviewSort.HIGHEST.value:
        return sorted(filtered, key=lambda review: review.rating, reverse=True)
    return filtered


def review_filter_options(reviews: Sequence[Review] = REVIEWS) -> ReviewFilterOptions:
    groups = {service_group(review.service) for review in reviews if review.service}
    return ReviewFilterOptions(
        postcodes=sorted({review.postcode for review in reviews}),
        services=sorted(group for group in groups if group),
    )


def aggregate_rating(reviews: Sequence[Review] = REVIEWS) -> AggregateRating:
    if not reviews:
        return AggregateRating(rating_value=0.0, review_count=0)
    mean = sum(review.rating for review in reviews) / len(reviews)
    return AggregateRating(rating_value=round(mean, 1), review_count=len(reviews))
