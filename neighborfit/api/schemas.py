"""Pydantic schemas for API request/response models.

Wire names are camelCase (safetyScore, ageGroups.age18to34, ...); Python
attributes are snake_case. Each schema converts to and from its engine
dataclass.
"""

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from neighborfit.engine.ranking import NeighborhoodFilter
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
from neighborfit.models.preferences import (
    ActivityLevel,
    AgeGroup,
    Budget,
    LifestyleProfile,
    Priorities,
    SocialPreference,
    UserPreferences,
    WorkStyle,
)
from neighborfit.models.results import MatchingResult

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Envelope ----

class ApiResponse(BaseModel, Generic[T]):
    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def failure(error: str) -> dict[str, Any]:
    return {
        "success": False,
        "data": None,
        "error": error,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ---- Shared ----

class LocationSchema(CamelModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None

    def to_domain(self) -> Location:
        return Location(**self.model_dump())

    @classmethod
    def from_domain(cls, location: Location) -> "LocationSchema":
        return cls(
            latitude=location.latitude,
            longitude=location.longitude,
            address=location.address,
            city=location.city,
            state=location.state,
            zip_code=location.zip_code,
        )


# ---- Neighborhood ----

class AgeGroupsSchema(CamelModel):
    under_18: int = Field(0, ge=0)
    age_18_to_34: int = Field(0, ge=0, alias="age18to34")
    age_35_to_49: int = Field(0, ge=0, alias="age35to49")
    age_50_to_64: int = Field(0, ge=0, alias="age50to64")
    over_65: int = Field(0, ge=0)


class DemographicsSchema(CamelModel):
    total_population: int = Field(..., ge=0)
    median_age: float = Field(..., ge=0)
    median_income: float = Field(..., ge=0)
    diversity_index: float = Field(..., ge=0, le=100)
    education_level: Level
    family_friendly: bool
    age_groups: AgeGroupsSchema = Field(default_factory=AgeGroupsSchema)


class AmenitiesSchema(CamelModel):
    restaurants: int = Field(0, ge=0)
    cafes: int = Field(0, ge=0)
    bars: int = Field(0, ge=0)
    grocery_stores: int = Field(0, ge=0)
    parks: int = Field(0, ge=0)
    gyms: int = Field(0, ge=0)
    schools: int = Field(0, ge=0)
    hospitals: int = Field(0, ge=0)
    shopping_centers: int = Field(0, ge=0)
    entertainment: int = Field(0, ge=0)


class SafetySchema(CamelModel):
    crime_rate: float = Field(..., ge=0)
    safety_score: float = Field(..., ge=0, le=100)
    police_stations: int = Field(0, ge=0)
    emergency_services: int = Field(0, ge=0)
    well_lit_streets: bool = False


class TransportationSchema(CamelModel):
    walkability_score: float = Field(..., ge=0, le=100)
    transit_score: float = Field(..., ge=0, le=100)
    bike_score: float = Field(..., ge=0, le=100)
    public_transit_stops: int = Field(0, ge=0)
    bike_lanes: int = Field(0, ge=0)
    parking_availability: Level = Level.MEDIUM


class LifestyleMetricsSchema(CamelModel):
    # No upper bound: derived upstream and may exceed 100.
    nightlife: float = Field(0, ge=0)
    family_activities: float = Field(0, ge=0)
    outdoor_activities: float = Field(0, ge=0)
    cultural_events: float = Field(0, ge=0)
    community_engagement: float = Field(0, ge=0)


class NeighborhoodScoresSchema(CamelModel):
    overall: float = 0
    safety: float = 0
    amenities: float = 0
    transportation: float = 0
    lifestyle: float = 0
    affordability: float = 0


class NeighborhoodSchema(CamelModel):
    id: str = Field(..., min_length=1)
    name: str
    location: LocationSchema
    demographics: DemographicsSchema
    amenities: AmenitiesSchema
    safety: SafetySchema
    transportation: TransportationSchema
    lifestyle: LifestyleMetricsSchema
    scores: NeighborhoodScoresSchema = Field(default_factory=NeighborhoodScoresSchema)
    last_updated: str | None = None

    def to_domain(self) -> Neighborhood:
        d = self.demographics
        return Neighborhood(
            id=self.id,
            name=self.name,
            location=self.location.to_domain(),
            demographics=Demographics(
                total_population=d.total_population,
                median_age=d.median_age,
                median_income=d.median_income,
                diversity_index=d.diversity_index,
                education_level=d.education_level,
                family_friendly=d.family_friendly,
                age_groups=AgeGroups(**d.age_groups.model_dump()),
            ),
            amenities=Amenities(**self.amenities.model_dump()),
            safety=SafetyMetrics(**self.safety.model_dump()),
            transportation=TransportationInfo(**self.transportation.model_dump()),
            lifestyle=LifestyleMetrics(**self.lifestyle.model_dump()),
            scores=NeighborhoodScores(**self.scores.model_dump()),
            last_updated=self.last_updated,
        )

    @classmethod
    def from_domain(cls, n: Neighborhood) -> "NeighborhoodSchema":
        d = n.demographics
        return cls(
            id=n.id,
            name=n.name,
            location=LocationSchema.from_domain(n.location),
            demographics=DemographicsSchema(
                total_population=d.total_population,
                median_age=d.median_age,
                median_income=d.median_income,
                diversity_index=d.diversity_index,
                education_level=d.education_level,
                family_friendly=d.family_friendly,
                age_groups=AgeGroupsSchema(**vars(d.age_groups)),
            ),
            amenities=AmenitiesSchema(**vars(n.amenities)),
            safety=SafetySchema(**vars(n.safety)),
            transportation=TransportationSchema(**vars(n.transportation)),
            lifestyle=LifestyleMetricsSchema(**vars(n.lifestyle)),
            scores=NeighborhoodScoresSchema(**vars(n.scores)),
            last_updated=n.last_updated,
        )


# ---- Preferences ----

class BudgetSchema(CamelModel):
    min: float = Field(..., ge=0)
    max: float = Field(..., ge=0)


class PrioritiesSchema(CamelModel):
    safety: int | None = Field(None, ge=0, le=10)
    amenities: int | None = Field(None, ge=0, le=10)
    transportation: int | None = Field(None, ge=0, le=10)
    lifestyle: int | None = Field(None, ge=0, le=10)
    affordability: int | None = Field(None, ge=0, le=10)
    family_friendly: int | None = Field(None, ge=0, le=10)
    nightlife: int | None = Field(None, ge=0, le=10)
    quietness: int | None = Field(None, ge=0, le=10)


class LifestyleProfileSchema(CamelModel):
    age_group: AgeGroup = AgeGroup.MIXED
    activity_level: ActivityLevel = ActivityLevel.MEDIUM
    social_preference: SocialPreference = SocialPreference.BALANCED
    work_style: WorkStyle = WorkStyle.HYBRID


class UserPreferencesSchema(CamelModel):
    id: str = Field(..., min_length=1)
    location: LocationSchema
    budget: BudgetSchema
    priorities: PrioritiesSchema = Field(default_factory=PrioritiesSchema)
    lifestyle: LifestyleProfileSchema = Field(default_factory=LifestyleProfileSchema)
    must_haves: list[str] = Field(default_factory=list)
    deal_breakers: list[str] = Field(default_factory=list)

    def to_domain(self) -> UserPreferences:
        return UserPreferences(
            id=self.id,
            location=self.location.to_domain(),
            budget=Budget(min=self.budget.min, max=self.budget.max),
            priorities=Priorities(**self.priorities.model_dump()),
            lifestyle=LifestyleProfile(**self.lifestyle.model_dump()),
            must_haves=tuple(self.must_haves),
            deal_breakers=tuple(self.deal_breakers),
        )

    @classmethod
    def from_domain(cls, p: UserPreferences) -> "UserPreferencesSchema":
        return cls(
            id=p.id,
            location=LocationSchema.from_domain(p.location),
            budget=BudgetSchema(min=p.budget.min, max=p.budget.max),
            priorities=PrioritiesSchema(**p.priorities.as_dict()),
            lifestyle=LifestyleProfileSchema(**vars(p.lifestyle)),
            must_haves=list(p.must_haves),
            deal_breakers=list(p.deal_breakers),
        )


class LifestyleProfileUpdate(CamelModel):
    age_group: AgeGroup | None = None
    activity_level: ActivityLevel | None = None
    social_preference: SocialPreference | None = None
    work_style: WorkStyle | None = None


class PreferencesUpdate(CamelModel):
    """Partial profile. Omitted fields keep their stored (or default) value."""

    location: LocationSchema | None = None
    budget: BudgetSchema | None = None
    priorities: PrioritiesSchema | None = None
    lifestyle: LifestyleProfileUpdate | None = None
    must_haves: list[str] | None = None
    deal_breakers: list[str] | None = None

    def to_changes(self) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        if self.location is not None:
            changes["location"] = self.location.to_domain()
        if self.budget is not None:
            changes["budget"] = Budget(min=self.budget.min, max=self.budget.max)
        if self.priorities is not None:
            changes["priorities"] = self.priorities.model_dump()
        if self.lifestyle is not None:
            changes["lifestyle"] = self.lifestyle.model_dump()
        if self.must_haves is not None:
            changes["must_haves"] = self.must_haves
        if self.deal_breakers is not None:
            changes["deal_breakers"] = self.deal_breakers
        return changes


# ---- Matching ----

class FilterSchema(CamelModel):
    search: str | None = None
    min_safety_score: float | None = Field(None, ge=0)
    min_walkability_score: float | None = Field(None, ge=0)
    max_crime_rate: float | None = Field(None, ge=0)
    min_amenities: int | None = Field(None, ge=0)

    def to_domain(self) -> NeighborhoodFilter:
        return NeighborhoodFilter(**self.model_dump())


class MatchingRequest(CamelModel):
    preferences: UserPreferencesSchema
    neighborhoods: list[NeighborhoodSchema]
    filters: FilterSchema | None = None
    sort: bool = False
    limit: int | None = Field(None, ge=1)


class SubScoresSchema(CamelModel):
    safety: float
    amenities: float
    transportation: float
    lifestyle: float
    affordability: float
    family_friendly: float
    nightlife: float
    quietness: float


class MatchingResultSchema(CamelModel):
    neighborhood: NeighborhoodSchema
    compatibility_score: int
    match_reasons: list[str]
    potential_concerns: list[str]
    recommendations: list[str]
    sub_scores: SubScoresSchema

    @classmethod
    def from_domain(cls, result: MatchingResult) -> "MatchingResultSchema":
        return cls(
            neighborhood=NeighborhoodSchema.from_domain(result.neighborhood),
            compatibility_score=result.compatibility_score,
            match_reasons=result.match_reasons,
            potential_concerns=result.potential_concerns,
            recommendations=result.recommendations,
            sub_scores=SubScoresSchema(**{
                name: float(value) for name, value in result.sub_scores.as_dict().items()
            }),
        )


class DeleteResult(BaseModel):
    deleted: bool
