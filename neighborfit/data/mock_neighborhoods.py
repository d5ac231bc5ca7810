"""Synthetic neighborhood records for development and demos.

All randomness comes from the random.Random passed to MockNeighborhoodSource,
so a seeded generator produces the same records every run. Generated records
are cached by id for cache_ttl_seconds, so looking a neighborhood up again
returns the same record instead of a fresh draw. The cache holds at most
cache_max_entries records.
"""

import logging
import random
import re
import time
from datetime import datetime, timezone
from typing import Callable

from cachetools import TTLCache

from neighborfit.models.neighborhood import (
    AgeGroups,
    Amenities,
    Demographics,
    LifestyleMetrics,
    Level,
    Location,
    Neighborhood,
    NeighborhoodScores,
    SafetyMetrics,
    TransportationInfo,
)

logger = logging.getLogger(__name__)

DISTRICT_NAMES = [
    "Downtown", "Westside", "Eastside", "North End",
    "South District", "Central", "Riverside", "Hillside",
]

# Share of residents per age bucket
AGE_MIX = {
    "under_18": 0.20,
    "age_18_to_34": 0.25,
    "age_35_to_49": 0.25,
    "age_50_to_64": 0.20,
    "over_65": 0.10,
}

# Degrees of lat/lng offset per mile of search radius
DEGREES_PER_RADIUS_MILE = 0.01

_ID_PATTERN = re.compile(r"^neighborhood_(-?\d+(?:\.\d+)?)_(-?\d+(?:\.\d+)?)$")


def neighborhood_id(location: Location) -> str:
    return f"neighborhood_{location.latitude:.4f}_{location.longitude:.4f}"


def parse_neighborhood_id(value: str) -> Location:
    """Recover the coordinates encoded in a neighborhood id.

    Raises ValueError for anything not shaped like neighborhood_<lat>_<lng>.
    """
    m = _ID_PATTERN.match(value)
    if not m:
        raise ValueError(f"Invalid neighborhood ID format: {value!r}")
    lat, lng = float(m.group(1)), float(m.group(2))
    if not (-90 <= lat <= 90 and -180 <= lng <= 180):
        raise ValueError(f"Invalid coordinates in neighborhood ID: {value!r}")
    return Location(latitude=lat, longitude=lng)


def education_level(median_income: int) -> Level:
    if median_income > 80_000:
        return Level.HIGH
    if median_income > 50_000:
        return Level.MEDIUM
    return Level.LOW


def derive_lifestyle(amenities: Amenities, rng: random.Random) -> LifestyleMetrics:
    """Lifestyle metrics from amenity counts.

    Nightlife, family and outdoor metrics scale raw counts and are not capped,
    so amenity-dense areas land above 100.
    """
    return LifestyleMetrics(
        nightlife=(amenities.bars + amenities.restaurants) * 3,
        family_activities=(amenities.parks + amenities.schools) * 4,
        outdoor_activities=amenities.parks * 8,
        cultural_events=round(rng.random() * 100),
        community_engagement=round(50 + rng.random() * 50),
    )


class MockNeighborhoodSource:
    def __init__(
        self,
        rng: random.Random,
        cache_ttl_seconds: float = 3600,
        cache_max_entries: int = 1024,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.rng = rng
        self._now = now
        self._cache = TTLCache(
            maxsize=cache_max_entries, ttl=cache_ttl_seconds, timer=clock
        )

    # ------------------------------------------------------------------
    # NeighborhoodSource
    # ------------------------------------------------------------------

    def get_neighborhood(self, location: Location) -> Neighborhood:
        key = neighborhood_id(location)
        hit = self._cache.get(key)
        if hit is not None:
            logger.debug("Cache hit: %s", key)
            return hit

        neighborhood = self.generate(location)
        self._cache[key] = neighborhood
        return neighborhood

    @property
    def cache_size(self) -> int:
        """Live cached records; expired entries are evicted first."""
        self._cache.expire()
        return len(self._cache)

    def find_neighborhoods(
        self,
        center: Location,
        radius_miles: float,
        min_count: int = 3,
        max_count: int = 10,
    ) -> list[Neighborhood]:
        """Scatter min_count..max_count neighborhoods around a point."""
        count = self.rng.randint(min_count, max_count)
        spread = radius_miles * DEGREES_PER_RADIUS_MILE
        results = []
        for _ in range(count):
            lat = center.latitude + (self.rng.random() - 0.5) * spread
            lng = center.longitude + (self.rng.random() - 0.5) * spread
            point = Location(
                latitude=max(-90.0, min(90.0, lat)),
                longitude=max(-180.0, min(180.0, lng)),
                city=center.city,
                state=center.state,
            )
            results.append(self.get_neighborhood(point))
        logger.info(
            "Generated %d neighborhoods around %.4f, %.4f",
            len(results), center.latitude, center.longitude,
        )
        return results

    # ------------------------------------------------------------------
    # Record generation
    # ------------------------------------------------------------------

    def generate(self, location: Location) -> Neighborhood:
        rng = self.rng
        demographics = self._demographics()
        amenities = self._amenities()
        return Neighborhood(
            id=neighborhood_id(location),
            name=f"{rng.choice(DISTRICT_NAMES)} {location.city or 'District'}",
            location=location,
            demographics=demographics,
            amenities=amenities,
            safety=SafetyMetrics(
                crime_rate=rng.randint(5, 34),
                safety_score=round(70 + rng.random() * 30),
                police_stations=rng.randint(1, 3),
                emergency_services=rng.randint(1, 2),
                well_lit_streets=rng.random() > 0.3,
            ),
            transportation=TransportationInfo(
                walkability_score=round(50 + rng.random() * 50),
                transit_score=round(40 + rng.random() * 60),
                bike_score=round(30 + rng.random() * 70),
                public_transit_stops=rng.randint(2, 11),
                bike_lanes=rng.randint(5, 19),
                parking_availability=rng.choice(list(Level)),
            ),
            lifestyle=derive_lifestyle(amenities, rng),
            scores=self._scores(demographics, amenities),
            last_updated=self._now().isoformat(),
        )

    def _demographics(self) -> Demographics:
        rng = self.rng
        population = rng.randint(2_000, 16_999)
        median_age = rng.randint(25, 54)
        median_income = rng.randint(40_000, 139_999)
        return Demographics(
            total_population=population,
            median_age=median_age,
            median_income=median_income,
            diversity_index=round(rng.random() * 100, 1),
            education_level=education_level(median_income),
            family_friendly=25 < median_age < 50,
            age_groups=AgeGroups(**{
                bucket: round(population * share) for bucket, share in AGE_MIX.items()
            }),
        )

    def _amenities(self) -> Amenities:
        rng = self.rng
        return Amenities(
            restaurants=rng.randint(5, 24),
            cafes=rng.randint(2, 11),
            bars=rng.randint(1, 8),
            grocery_stores=rng.randint(1, 5),
            parks=rng.randint(2, 9),
            gyms=rng.randint(1, 4),
            schools=rng.randint(2, 7),
            hospitals=rng.randint(1, 2),
            shopping_centers=rng.randint(1, 3),
            entertainment=rng.randint(1, 5),
        )

    def _scores(self, demographics: Demographics, amenities: Amenities) -> NeighborhoodScores:
        """Headline scores shown on listings; not used by compatibility scoring."""
        rng = self.rng
        income_ratio = demographics.median_income / 100_000
        amenity_ratio = amenities.total / 50
        return NeighborhoodScores(
            overall=round(income_ratio * 30 + amenity_ratio * 40 + rng.random() * 30),
            safety=round(80 + rng.random() * 20),
            amenities=round(amenity_ratio * 100),
            transportation=round(60 + rng.random() * 40),
            lifestyle=round(50 + rng.random() * 50),
            affordability=round(income_ratio * 100),
        )
