"""Neighborhood attribute record types."""

from dataclasses import dataclass, field, fields
from enum import Enum


class Level(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None


@dataclass(frozen=True)
class AgeGroups:
    under_18: int = 0
    age_18_to_34: int = 0
    age_35_to_49: int = 0
    age_50_to_64: int = 0
    over_65: int = 0

    @property
    def total(self) -> int:
        return (
            self.under_18
            + self.age_18_to_34
            + self.age_35_to_49
            + self.age_50_to_64
            + self.over_65
        )


@dataclass(frozen=True)
class Demographics:
    total_population: int
    median_age: int
    median_income: int
    diversity_index: float  # 0-100
    education_level: Level
    family_friendly: bool
    age_groups: AgeGroups = field(default_factory=AgeGroups)


@dataclass(frozen=True)
class Amenities:
    restaurants: int = 0
    cafes: int = 0
    bars: int = 0
    grocery_stores: int = 0
    parks: int = 0
    gyms: int = 0
    schools: int = 0
    hospitals: int = 0
    shopping_centers: int = 0
    entertainment: int = 0

    @property
    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class SafetyMetrics:
    crime_rate: float  # incidents per 1000 residents
    safety_score: int  # 0-100
    police_stations: int = 0
    emergency_services: int = 0
    well_lit_streets: bool = False


@dataclass(frozen=True)
class TransportationInfo:
    walkability_score: int  # 0-100
    transit_score: int  # 0-100
    bike_score: int  # 0-100
    public_transit_stops: int = 0
    bike_lanes: int = 0
    parking_availability: Level = Level.MEDIUM


@dataclass(frozen=True)
class LifestyleMetrics:
    # Nominally 0-100, but derived upstream from raw counts and can overshoot.
    nightlife: int = 0
    family_activities: int = 0
    outdoor_activities: int = 0
    cultural_events: int = 0
    community_engagement: int = 0


@dataclass(frozen=True)
class NeighborhoodScores:
    overall: int = 0
    safety: int = 0
    amenities: int = 0
    transportation: int = 0
    lifestyle: int = 0
    affordability: int = 0


@dataclass(frozen=True)
class Neighborhood:
    id: str
    name: str
    location: Location
    demographics: Demographics
    amenities: Amenities
    safety: SafetyMetrics
    transportation: TransportationInfo
    lifestyle: LifestyleMetrics
    scores: NeighborhoodScores = field(default_factory=NeighborhoodScores)
    last_updated: str | None = None  # ISO-8601
