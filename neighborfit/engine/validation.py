"""Input checks run before any scoring.

Scoring never partially computes on bad input: every entry point validates
both records first and raises InvalidInputError with the offending field.
"""

import logging
from dataclasses import fields
from enum import Enum

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

logger = logging.getLogger(__name__)

MAX_PRIORITY_WEIGHT = 10
MAX_DIVERSITY_INDEX = 100


class InvalidInputError(ValueError):
    """A preference profile or neighborhood record cannot be scored."""


def _require(condition: bool, reason: str) -> None:
    if not condition:
        raise InvalidInputError(reason)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_record(value, expected: type, name: str) -> None:
    _require(isinstance(value, expected), f"{name} is required")


def _check_location(location: Location, prefix: str) -> None:
    _check_record(location, Location, f"{prefix}.location")
    _require(_is_number(location.latitude), f"{prefix}.location.latitude must be a number")
    _require(_is_number(location.longitude), f"{prefix}.location.longitude must be a number")
    _require(-90 <= location.latitude <= 90, f"{prefix}.location.latitude out of range")
    _require(-180 <= location.longitude <= 180, f"{prefix}.location.longitude out of range")


def _check_non_negative(obj, prefix: str) -> None:
    for f in fields(obj):
        value = getattr(obj, f.name)
        if isinstance(value, (bool, Enum)):
            continue
        _require(_is_number(value), f"{prefix}.{f.name} must be a number")
        _require(value >= 0, f"{prefix}.{f.name} must be non-negative")


def validate_preferences(preferences: UserPreferences) -> None:
    """Raise InvalidInputError if the profile cannot be scored."""
    _check_record(preferences, UserPreferences, "preferences")
    _check_location(preferences.location, "preferences")

    budget = preferences.budget
    _check_record(budget, Budget, "preferences.budget")
    _require(_is_number(budget.min) and _is_number(budget.max), "budget bounds must be numbers")
    _require(budget.min >= 0, "budget.min must be non-negative")
    _require(budget.min <= budget.max, "budget.min must not exceed budget.max")

    _check_record(preferences.priorities, Priorities, "preferences.priorities")
    for name, weight in preferences.priorities.as_dict().items():
        if weight is None:
            continue
        _require(_is_number(weight), f"priorities.{name} must be a number")
        _require(
            0 <= weight <= MAX_PRIORITY_WEIGHT,
            f"priorities.{name} must be between 0 and {MAX_PRIORITY_WEIGHT}",
        )

    lifestyle = preferences.lifestyle
    _check_record(lifestyle, LifestyleProfile, "preferences.lifestyle")
    _require(isinstance(lifestyle.age_group, AgeGroup), "lifestyle.age_group is not a known age group")
    _require(
        isinstance(lifestyle.activity_level, ActivityLevel),
        "lifestyle.activity_level is not a known activity level",
    )
    _require(
        isinstance(lifestyle.social_preference, SocialPreference),
        "lifestyle.social_preference is not a known social preference",
    )


def _check_demographics(demo: Demographics, prefix: str) -> None:
    _check_record(demo, Demographics, f"{prefix}.demographics")
    for name in ("total_population", "median_age", "median_income", "diversity_index"):
        value = getattr(demo, name)
        _require(_is_number(value), f"{prefix}.demographics.{name} must be a number")
        _require(value >= 0, f"{prefix}.demographics.{name} must be non-negative")
    _require(
        demo.diversity_index <= MAX_DIVERSITY_INDEX,
        f"{prefix}.demographics.diversity_index must not exceed {MAX_DIVERSITY_INDEX}",
    )
    _require(
        isinstance(demo.education_level, Level),
        f"{prefix}.demographics.education_level is not a known level",
    )

    _check_record(demo.age_groups, AgeGroups, f"{prefix}.demographics.age_groups")
    _check_non_negative(demo.age_groups, f"{prefix}.demographics.age_groups")
    # Population shares are clamped, so an overfull breakdown still scores
    if demo.age_groups.total > demo.total_population:
        logger.warning(
            "%s: age groups sum to %d, above total population %d",
            prefix, demo.age_groups.total, demo.total_population,
        )


def validate_neighborhood(neighborhood: Neighborhood) -> None:
    """Raise InvalidInputError if the record cannot be scored."""
    _check_record(neighborhood, Neighborhood, "neighborhood")
    _require(isinstance(neighborhood.id, str) and bool(neighborhood.id), "neighborhood.id is required")
    prefix = f"neighborhood[{neighborhood.id}]"
    _require(isinstance(neighborhood.name, str), f"{prefix}.name is required")
    _check_location(neighborhood.location, prefix)

    _check_demographics(neighborhood.demographics, prefix)

    _check_record(neighborhood.amenities, Amenities, f"{prefix}.amenities")
    _check_non_negative(neighborhood.amenities, f"{prefix}.amenities")

    _check_record(neighborhood.safety, SafetyMetrics, f"{prefix}.safety")
    _check_non_negative(neighborhood.safety, f"{prefix}.safety")

    transportation = neighborhood.transportation
    _check_record(transportation, TransportationInfo, f"{prefix}.transportation")
    _require(
        isinstance(transportation.parking_availability, Level),
        f"{prefix}.transportation.parking_availability is not a known level",
    )
    _check_non_negative(transportation, f"{prefix}.transportation")

    _check_record(neighborhood.lifestyle, LifestyleMetrics, f"{prefix}.lifestyle")
    _check_non_negative(neighborhood.lifestyle, f"{prefix}.lifestyle")
