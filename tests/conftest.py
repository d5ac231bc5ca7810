"""Canonical fixtures shared by engine, data and API tests.

Neighborhood: 10,000 residents, $100K median income, 38 amenities,
safety 85 / crime 10, walk 80 / transit 60 / bike 50.
Preferences: budget $20K-$50K, no weights supplied, mixed/medium/balanced.

Canonical sub-scores:
  safety 93, amenities 76, transportation 65, lifestyle 60,
  affordability 100, family_friendly 63, nightlife 64, quietness 68
  -> uniform-weight compatibility 74
"""

from dataclasses import replace

import pytest

from neighborfit.models.neighborhood import (
    AgeGroups,
    Amenities,
    Demographics,
    LifestyleMetrics,
    Level,
    Location,
    Neighborhood,
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
)


@pytest.fixture
def canonical_neighborhood() -> Neighborhood:
    return Neighborhood(
        id="neighborhood_40.7128_-74.0060",
        name="Riverside",
        location=Location(latitude=40.7128, longitude=-74.0060, city="New York", state="NY"),
        demographics=Demographics(
            total_population=10_000,
            median_age=38,
            median_income=100_000,
            diversity_index=55.0,
            education_level=Level.HIGH,
            family_friendly=True,
            age_groups=AgeGroups(
                under_18=2_000,
                age_18_to_34=2_500,
                age_35_to_49=2_500,
                age_50_to_64=2_000,
                over_65=1_000,
            ),
        ),
        amenities=Amenities(
            restaurants=10,
            cafes=5,
            bars=4,
            grocery_stores=2,
            parks=5,
            gyms=2,
            schools=3,
            hospitals=1,
            shopping_centers=2,
            entertainment=4,
        ),
        safety=SafetyMetrics(
            crime_rate=10,
            safety_score=85,
            police_stations=2,
            emergency_services=1,
            well_lit_streets=True,
        ),
        transportation=TransportationInfo(
            walkability_score=80,
            transit_score=60,
            bike_score=50,
            public_transit_stops=6,
            bike_lanes=10,
            parking_availability=Level.MEDIUM,
        ),
        lifestyle=LifestyleMetrics(
            nightlife=60,
            family_activities=40,
            outdoor_activities=40,
            cultural_events=60,
            community_engagement=70,
        ),
        last_updated="2024-01-01T00:00:00+00:00",
    )


@pytest.fixture
def canonical_preferences() -> UserPreferences:
    return UserPreferences(
        id="user-1",
        location=Location(latitude=40.7128, longitude=-74.0060),
        budget=Budget(min=20_000, max=50_000),
        priorities=Priorities(),
        lifestyle=LifestyleProfile(
            age_group=AgeGroup.MIXED,
            activity_level=ActivityLevel.MEDIUM,
            social_preference=SocialPreference.BALANCED,
        ),
    )


@pytest.fixture
def make_neighborhood(canonical_neighborhood):
    """Canonical neighborhood with selected attribute groups overridden.

    make_neighborhood(safety={"safety_score": 90}, name="Eastside")
    """
    def _make(**overrides) -> Neighborhood:
        n = canonical_neighborhood
        top_level = {}
        for key, value in overrides.items():
            if isinstance(value, dict):
                group = getattr(n, key)
                if key == "demographics" and "age_groups" in value:
                    value = {**value, "age_groups": replace(group.age_groups, **value["age_groups"])}
                top_level[key] = replace(group, **value)
            else:
                top_level[key] = value
        return replace(n, **top_level)
    return _make


@pytest.fixture
def make_preferences(canonical_preferences):
    """Canonical preferences with selected fields overridden."""
    def _make(**overrides) -> UserPreferences:
        p = canonical_preferences
        top_level = {}
        for key, value in overrides.items():
            if isinstance(value, dict):
                top_level[key] = replace(getattr(p, key), **value)
            else:
                top_level[key] = value
        return replace(p, **top_level)
    return _make
