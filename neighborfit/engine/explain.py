"""Threshold rules that turn a neighborhood record into readable feedback.

Each rule fires independently of the others and of the aggregate score. Rules
are evaluated in a fixed order so the output lists are deterministic.
"""

from neighborfit.engine.subscores import clamp, estimated_housing_cost, to_decimal
from neighborfit.models.neighborhood import Neighborhood
from neighborfit.models.preferences import ActivityLevel, AgeGroup, UserPreferences
from neighborfit.models.results import Explanation

EXCELLENT_SAFETY = 80
ABUNDANT_AMENITIES = 30
HIGH_WALKABILITY = 70

HIGH_CRIME_RATE = 30  # per 1000 residents
LOW_WALKABILITY = 30

CAR_RECOMMENDED_WALKABILITY = 50
SAFETY_RESEARCH_THRESHOLD = 70
LOW_OUTDOOR_ACTIVITIES = 50


def match_reasons(preferences: UserPreferences, neighborhood: Neighborhood) -> list[str]:
    reasons: list[str] = []

    if clamp(neighborhood.safety.safety_score) > EXCELLENT_SAFETY:
        reasons.append("Excellent safety ratings")

    if neighborhood.amenities.total > ABUNDANT_AMENITIES:
        reasons.append("Abundant local amenities")

    if clamp(neighborhood.transportation.walkability_score) > HIGH_WALKABILITY:
        reasons.append("Highly walkable neighborhood")

    if (
        preferences.lifestyle.age_group == AgeGroup.FAMILY
        and neighborhood.demographics.family_friendly
    ):
        reasons.append("Family-friendly community")

    return reasons


def potential_concerns(preferences: UserPreferences, neighborhood: Neighborhood) -> list[str]:
    concerns: list[str] = []

    if to_decimal(neighborhood.safety.crime_rate) > HIGH_CRIME_RATE:
        concerns.append("Higher than average crime rate")

    if estimated_housing_cost(neighborhood) > to_decimal(preferences.budget.max):
        concerns.append("May exceed your budget range")

    if clamp(neighborhood.transportation.walkability_score) < LOW_WALKABILITY:
        concerns.append("Limited walkability")

    return concerns


def recommendations(preferences: UserPreferences, neighborhood: Neighborhood) -> list[str]:
    tips: list[str] = []

    if clamp(neighborhood.transportation.walkability_score) < CAR_RECOMMENDED_WALKABILITY:
        tips.append("Consider getting a car or using ride-sharing services")

    if clamp(neighborhood.safety.safety_score) < SAFETY_RESEARCH_THRESHOLD:
        tips.append("Research specific safety measures and local crime patterns")

    if (
        preferences.lifestyle.activity_level == ActivityLevel.HIGH
        and clamp(neighborhood.lifestyle.outdoor_activities) < LOW_OUTDOOR_ACTIVITIES
    ):
        tips.append("Look for nearby parks and recreational facilities")

    return tips


def build_explanation(preferences: UserPreferences, neighborhood: Neighborhood) -> Explanation:
    return Explanation(
        reasons=match_reasons(preferences, neighborhood),
        concerns=potential_concerns(preferences, neighborhood),
        recommendations=recommendations(preferences, neighborhood),
    )
