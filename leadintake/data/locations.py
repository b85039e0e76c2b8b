# leadintake/data/locations.py
from __future__ import annotations

from typing import List, Optional

from leadintake.schemas.content import Coordinates, Location, Zone


def _location(
    slug: str,
    name: str,
    postcode: str,
    zone: Zone,
    region: str,
    highlight_service: Optional[str],
    lat: float,
    lng: float,
    nearby: List[str],
) -> Location:
    return Location(
        slug=slug,
        name=name,
        postcode=postcode,
        zone=zone,
        region=region,
        highlight_service=highlight_service,
        coordinates=Coordinates(lat=lat, lng=lng),
        nearby=nearby,
    )


LOCATIONS: List[Location] = [
    # Gold zone: Surrey, high-ticket work
    _location("bathroom-fitters-esher-kt10", "Esher", "KT10", Zone.GOLD, "Surrey",
              "Bespoke Wet Rooms", 51.3699, -0.3649,
              ["Cobham", "Weybridge", "Kingston upon Thames", "Wimbledon"]),
    _location("luxury-bathrooms-cobham-kt11", "Cobham", "KT11", Zone.GOLD, "Surrey",
              "Marble Tiling", 51.3290, -0.4111,
              ["Esher", "Weybridge", "Leatherhead", "Kingston upon Thames"]),
    _location("bathroom-renovations-weybridge-kt13", "Weybridge", "KT13", Zone.GOLD, "Surrey",
              "Full Home Renovation", 51.3719, -0.4595,
              ["Cobham", "Esher", "Kingston upon Thames", "Wimbledon"]),
    _location("bathroom-fitters-kingston-kt1", "Kingston upon Thames", "KT1", Zone.GOLD, "Surrey",
              "Structural Knock-Throughs", 51.4123, -0.3006,
              ["Wimbledon", "Esher", "Putney", "Raynes Park"]),
    _location("builders-leatherhead-kt22", "Leatherhead", "KT22", Zone.GOLD, "Surrey",
              "Full Bathroom Renovations", 51.2979, -0.3298,
              ["Cobham", "Esher", "Sutton", "Croydon"]),
    # Renovation zone: South West London
    _location("bathroom-fitters-wimbledon-sw19", "Wimbledon", "SW19", Zone.RENOVATION, "South West London",
              "Wet Room Installations", 51.4214, -0.2064,
              ["Kingston upon Thames", "Putney", "Raynes Park", "Balham"]),
    _location("bathroom-fitters-streatham-sw16", "Streatham", "SW16", Zone.RENOVATION, "South West London",
              "Victorian Terrace Renovations", 51.4321, -0.1256,
              ["Balham", "Thornton Heath", "Crystal Palace", "Dulwich Village"]),
    _location("bathroom-renovations-balham-sw12", "Balham", "SW12", Zone.RENOVATION, "South West London",
              "Modern Bathroom Designs", 51.4431, -0.1525,
              ["Streatham", "Wimbledon", "Putney", "Thornton Heath"]),
    _location("bathroom-specialists-raynes-park-sw20", "Raynes Park", "SW20", Zone.RENOVATION, "South West London",
              "Luxury Tiling Services", 51.4093, -0.2297,
              ["Wimbledon", "Kingston upon Thames", "Putney", "Balham"]),
    _location("bathroom-fitters-putney-sw15", "Putney", "SW15", Zone.RENOVATION, "South West London",
              "Premium Bathroom Suites", 51.4607, -0.2160,
              ["Wimbledon", "Kingston upon Thames", "Balham", "Raynes Park"]),
    # Village zone: South East London
    _location("luxury-bathrooms-dulwich-se21", "Dulwich Village", "SE21", Zone.VILLAGE, "South East London",
              "Full Home Renovation", 51.4447, -0.0860,
              ["East Dulwich", "Crystal Palace", "Streatham", "West Norwood"]),
    _location("bathroom-renovations-east-dulwich-se22", "East Dulwich", "SE22", Zone.VILLAGE, "South East London",
              "Designer Wet Rooms", 51.4536, -0.0698,
              ["Dulwich Village", "Crystal Palace", "West Norwood", "Streatham"]),
    _location("bathroom-fitters-crystal-palace-se19", "Crystal Palace", "SE19", Zone.VILLAGE, "South East London",
              "Structural Building Repairs", 51.4180, -0.0710,
              ["Dulwich Village", "East Dulwich", "Streatham", "Thornton Heath"]),
    _location("bathroom-specialists-west-norwood-se27", "West Norwood", "SE27", Zone.VILLAGE, "South East London",
              "Complete Bathroom Transformations", 51.4321, -0.1033,
              ["Dulwich Village", "Crystal Palace", "Streatham", "Thornton Heath"]),
    # Foundation zone: South London
    _location("bathroom-renovations-croydon-cr0", "Croydon", "CR0", Zone.FOUNDATION, "South London",
              "Full Bathroom Renovations", 51.3762, -0.0982,
              ["Thornton Heath", "Sutton", "Purley", "Crystal Palace"]),
    _location("bathroom-specialists-thornton-heath-cr7", "Thornton Heath", "CR7", Zone.FOUNDATION, "South London",
              "Local Experts", 51.3989, -0.1003,
              ["Croydon", "Streatham", "Crystal Palace", "West Norwood"]),
    _location("bathroom-fitters-sutton-sm1", "Sutton", "SM1", Zone.FOUNDATION, "South London",
              "Wet Room Installations", 51.3618, -0.1945,
              ["Croydon", "Leatherhead", "Purley", "Kingston upon Thames"]),
    _location("bathroom-renovations-purley-cr8", "Purley", "CR8", Zone.FOUNDATION, "South London",
              "Luxury Tiling Services", 51.3369, -0.1132,
              ["Croydon", "Sutton", "Leatherhead", "Thornton Heath"]),
]
