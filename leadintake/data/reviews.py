# leadintake/data/reviews.py
"""Published customer reviews (ratings out of 10)."""
from __future__ import annotations

from datetime import date
from typing import List

from leadintake.schemas.content import Review

REVIEWS: List[Review] = [
    Review(
        id="review-1",
        author="Sarah M.",
        rating=10,
        text="Fredi and his team completely transformed our family bathroom. Tidy every day and finished on schedule.",
        location="Streatham",
        postcode="SW16",
        date=date(2025, 11, 14),
        verified=True,
        service="Full bathroom renovation",
    ),
    Review(
        id="review-2",
        author="James P.",
        rating=10,
        text="Wet room came out better than we imagined. The tanking and drainage were explained at every stage.",
        location="Wimbledon",
        postcode="SW19",
        date=date(2025, 9, 2),
        verified=True,
        service="Wet room installation",
    ),
    Review(
        id="review-3",
        author="Priya K.",
        rating=9,
        text="Large format porcelain tiling is perfectly aligned. Quote was clear and there were no surprises.",
        location="Purley",
        postcode="CR8",
        date=date(2025, 6, 21),
        verified=True,
        service="Tiling",
    ),
    Review(
        id="review-4",
        author="David L.",
        rating=10,
        text="Single storey rear extension delivered with building control sign-off. Highly recommended.",
        location="Esher",
        postcode="KT10",
        date=date(2024, 10, 5),
        verified=True,
        service="Rear extension",
    ),
    Review(
        id="review-5",
        author="Helen R.",
        rating=9,
        text="Replaced the bathroom suite and fixed a long-standing leak. Friendly and punctual.",
        location="Croydon",
        postcode="CR0",
        date=date(2025, 3, 30),
        verified=False,
        service="Bathroom refurbishment and plumbing",
    ),
    Review(
        id="review-6",
        author="Tom W.",
        rating=10,
        text="Knocked through to make a larger ensuite, RSJ fitted and everything made good.",
        location="Kingston upon Thames",
        postcode="KT1",
        date=date(2024, 12, 12),
        verified=True,
        service="Structural knock-through",
    ),
    Review(
        id="review-7",
        author="Grace O.",
        rating=8,
        text="Kitchen splashback and painting finished neatly. Would use again.",
        location="Streatham",
        postcode="SW16",
        date=date(2024, 7, 19),
        verified=True,
        service="Kitchen tiles and painting",
    ),
    Review(
        id="review-8",
        author="Mark B.",
        rating=10,
        text="Accessible shower for my mother with grab rails and a level floor. Thoughtful work throughout.",
        location="Sutton",
        postcode="SM1",
        date=date(2025, 1, 8),
        verified=True,
        service="Accessible bathroom",
    ),
    Review(
        id="review-9",
        author="Anna S.",
        rating=10,
        text="Professional from the first visit to the final clean. Our bathroom looks like a hotel.",
        location="Dulwich Village",
        postcode="SE21",
        date=date(2025, 8, 11),
        verified=True,
    ),
]
