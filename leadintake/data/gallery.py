# leadintake/data/gallery.py
"""
Gallery image metadata, grouped into Showroom, Trust, Transformation and
Craftsmanship. Priority images are the ones shown above the fold.
"""
from __future__ import annotations

from typing import List, Optional

from leadintake.schemas.content import GalleryCategory, GalleryImage


def _image(
    image_id: str,
    filename: str,
    alt: str,
    category: GalleryCategory,
    location: Optional[str],
    service: Optional[str],
    height: int = 800,
    priority: bool = False,
) -> GalleryImage:
    return GalleryImage(
        id=image_id,
        src=f"/images/{filename}",
        alt=alt,
        category=category,
        location=location,
        service=service,
        width=1200,
        height=height,
        priority=priority,
    )


SHOWROOM = GalleryCategory.SHOWROOM
TRUST = GalleryCategory.TRUST
TRANSFORMATION = GalleryCategory.TRANSFORMATION
CRAFTSMANSHIP = GalleryCategory.CRAFTSMANSHIP


GALLERY_IMAGES: List[GalleryImage] = [
    _image("luxury-marble-bathroom-1", "luxury-marble-bathroom-black-porcelain-floor.webp",
           "Luxury marble bathroom with black porcelain floor tiles - Premium bathroom renovation South London",
           SHOWROOM, "South London", "Full Bathroom Renovation", priority=True),
    _image("luxury-marble-bathroom-2", "luxury-marble-bathroom-black-porcelain.webp",
           "Luxury marble bathroom with black porcelain tiles and modern fixtures - Esher bathroom fitters",
           SHOWROOM, "Esher", "Luxury Bathroom", priority=True),
    _image("luxury-walk-in-shower", "luxury-marble-bathroom-walk-in-shower.webp",
           "Luxury marble bathroom with walk-in shower installation - Wet room specialists Surrey",
           SHOWROOM, "Surrey", "Wet Room Installation", priority=True),
    _image("bespoke-hexagon-bathroom", "bespoke-bathroom-hexagon-floor-tiles-led-lighting.webp",
           "Bespoke bathroom with hexagon floor tiles and LED lighting - Modern bathroom design Streatham",
           SHOWROOM, "Streatham", "Luxury Tiling"),
    _image("grey-marble-vanity", "grey-marble-tiled-bathroom-vanity.webp",
           "Grey marble tiled bathroom with modern vanity unit - Bathroom renovation Wimbledon",
           SHOWROOM, "Wimbledon", "Full Bathroom Renovation"),
    _image("white-walk-in-shower", "luxury-walk-in-shower-installation-white-tiles.webp",
           "Luxury walk-in shower installation with white tiles - Wet room fitters Croydon",
           SHOWROOM, "Croydon", "Wet Room Installation"),
    _image("modern-white-vanity", "modern-bathroom-renovation-white-vanity-unit.webp",
           "Modern bathroom renovation with white vanity unit and storage - Bathroom fitters Sutton",
           SHOWROOM, "Sutton", "Full Bathroom Renovation"),
    _image("grey-subway-tile", "fredi-builders-grey-vanity-subway-tile-bathroom.webp",
           "Grey vanity with subway tile bathroom - Contemporary bathroom design Epsom",
           SHOWROOM, "Epsom", "Full Bathroom Renovation"),
    _image("modern-shower-installation", "modern-bathroom-shower-installation.webp",
           "Modern bathroom shower installation with glass enclosure - Shower fitting Carshalton",
           SHOWROOM, "Carshalton", "Shower Installation"),
    _image("grey-tiles-towel-radiator", "modern-bathroom-towel-radiator-grey-tiles.webp",
           "Modern bathroom with towel radiator and grey tiles - Bathroom renovation Wallington",
           SHOWROOM, "Wallington", "Full Bathroom Renovation"),
    _image("modern-toilet-chrome", "modern-toilet-fitting-chrome-towel-radiator.webp",
           "Modern toilet fitting with chrome towel radiator - Bathroom refurbishment Mitcham",
           SHOWROOM, "Mitcham", "Bathroom Refurbishment"),
    _image("small-bathroom-black-frame", "small-bathroom-design-black-frame-shower.webp",
           "Small bathroom design with black frame shower enclosure - Compact bathroom specialists Morden",
           SHOWROOM, "Morden", "Small Bathroom Design"),
    _image("white-family-bathroom", "white-tiled-family-bathroom-refurbishment.webp",
           "White tiled family bathroom refurbishment - Family bathroom renovation Thornton Heath",
           SHOWROOM, "Thornton Heath", "Bathroom Refurbishment"),
    _image("fitted-bathtub-white", "fitted-bathtub-white-bathroom-renovation.webp",
           "Fitted bathtub in white bathroom renovation - Traditional bathroom fitters Cheam",
           SHOWROOM, "Cheam", "Full Bathroom Renovation"),
    _image("fredi-front-van", "fredi-front-van.webp",
           "Fredi Builders company van - Professional bathroom renovation service Surrey and South London",
           TRUST, "Surrey", "Professional Service", priority=True),
    _image("branded-van-team", "man-branded-van.webp",
           "Fredi Builders branded van and team member - Professional bathroom fitters South London",
           TRUST, "South London", "Professional Service"),
    _image("bathroom-before-after-1", "bathroom-before-after-1.webp",
           "Bathroom transformation before and after - Complete bathroom renovation Streatham SW16",
           TRANSFORMATION, "Streatham", "Full Bathroom Renovation", height=600),
    _image("bathroom-before-after-2", "bathroom-before-after-2.webp",
           "Bathroom before and after renovation - Bathroom transformation South London",
           TRANSFORMATION, "South London", "Full Bathroom Renovation", height=600),
    _image("flat-roof-extension", "flat-roof-extension-construction-london.webp",
           "Flat roof extension construction in progress - Building contractors London",
           CRAFTSMANSHIP, "London", "Home Extension"),
    _image("home-extension-construction", "home-extension-construction-site-london.webp",
           "Home extension construction site - Master builders London",
           CRAFTSMANSHIP, "London", "Home Extension"),
    _image("single-story-extension", "single-story-rear-extension-flat-roof.webp",
           "Single story rear extension with flat roof - Home extension specialists Surrey",
           CRAFTSMANSHIP, "Surrey", "Home Extension"),
    _image("grp-flat-roof", "grp-fiberglass-flat-roof-laying.webp",
           "GRP fiberglass flat roof installation - Roofing specialists South London",
           CRAFTSMANSHIP, "South London", "Roofing"),
    _image("custom-timber-garden-room", "custom-timber-garden-room-green-roof.webp",
           "Custom timber garden room with green roof - Bespoke building projects Surrey",
           CRAFTSMANSHIP, "Surrey", "Garden Room"),
    _image("bespoke-home-renovation", "fredi-builders-bespoke-home-renovation-london.webp",
           "Bespoke home renovation project - Quality building work London",
           CRAFTSMANSHIP, "London", "Home Renovation"),
]
