"""Per-dimension compatibility calculators.

Every calculator takes (preferences, neighborhood) and returns a Decimal in
0-100, even when the dimension only looks at the neighborhood. That keeps the
eight of them interchangeable for the aggregator.

Dimension rules:
  Safety:          safety score + up to 10 bonus points for crime under 50/1000
  Amenities:       total amenity count, 50 venues = 100
  Transportation:  40% walk, 30% transit, 30% bike
  Lifestyle:       30% age mix, 30% activity level, 40% social preference
  Affordability:   step function of est. housing cost (30% of median income)
  Family-friendly: schools (0-25) + parks/activities (0-25) + family share (0-50)
  Nightlife:       bars/restaurants (0-40) + nightlife metric (0-60)
  Quietness:       inverse of nightlife and entertainment venues
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

from neighborfit.models.neighborhood import Demographics, LifestyleMetrics, Neighborhood
from neighborfit.models.preferences import (
    ActivityLevel,
    AgeGroup,
    SocialPreference,
    UserPreferences,
)
from neighborfit.models.results import SubScores

ZERO = Decimal("0")
HUNDRED = Decimal("100")

AMENITY_SATURATION = 50  # venues for a full amenities score
HOUSING_SHARE_OF_INCOME = Decimal("0.3")
MIXED_AGE_COMPATIBILITY = Decimal("75")
NEUTRAL = Decimal("50")


def to_decimal(value: int | float | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: Decimal) -> Decimal:
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def clamp(value: int | float | Decimal, low: Decimal = ZERO, high: Decimal = HUNDRED) -> Decimal:
    return max(low, min(high, to_decimal(value)))


def estimated_housing_cost(neighborhood: Neighborhood) -> Decimal:
    """Annual housing cost approximated as 30% of median household income."""
    return to_decimal(neighborhood.demographics.median_income) * HOUSING_SHARE_OF_INCOME


def _population_share(count: int, demographics: Demographics) -> Decimal:
    """Fraction (0-1) of residents in a group; 0 for an empty neighborhood."""
    if demographics.total_population <= 0:
        return ZERO
    share = to_decimal(count) / to_decimal(demographics.total_population)
    return clamp(share, ZERO, Decimal("1"))


# ------------------------------------------------------------------
# Lifestyle components
# ------------------------------------------------------------------

def age_group_compatibility(age_group: AgeGroup, demographics: Demographics) -> Decimal:
    """Share of the population (0-100) in the user's life stage."""
    groups = demographics.age_groups
    if age_group == AgeGroup.YOUNG:
        count = groups.age_18_to_34
    elif age_group == AgeGroup.FAMILY:
        count = groups.age_35_to_49 + groups.under_18
    elif age_group == AgeGroup.SENIOR:
        count = groups.over_65
    elif age_group == AgeGroup.MIXED:
        return MIXED_AGE_COMPATIBILITY
    else:
        return NEUTRAL
    return _population_share(count, demographics) * HUNDRED


def activity_compatibility(activity_level: ActivityLevel, lifestyle: LifestyleMetrics) -> Decimal:
    outdoor = clamp(lifestyle.outdoor_activities)
    cultural = clamp(lifestyle.cultural_events)

    if activity_level == ActivityLevel.HIGH:
        return round_half_up((outdoor + cultural) / 2)
    if activity_level == ActivityLevel.MEDIUM:
        return round_half_up((outdoor + cultural + NEUTRAL) / 3)
    if activity_level == ActivityLevel.LOW:
        return round_half_up((HUNDRED - outdoor + HUNDRED - cultural) / 2)
    return NEUTRAL


def social_compatibility(social_preference: SocialPreference, lifestyle: LifestyleMetrics) -> Decimal:
    community = clamp(lifestyle.community_engagement)
    nightlife = clamp(lifestyle.nightlife)

    if social_preference == SocialPreference.EXTROVERT:
        return round_half_up((community + nightlife) / 2)
    if social_preference == SocialPreference.INTROVERT:
        return round_half_up((HUNDRED - community + HUNDRED - nightlife) / 2)
    if social_preference == SocialPreference.BALANCED:
        return round_half_up((community + (HUNDRED - nightlife)) / 2)
    return NEUTRAL


# ------------------------------------------------------------------
# Dimension scores
# ------------------------------------------------------------------

def safety_score(preferences: UserPreferences, neighborhood: Neighborhood) -> Decimal:
    safety = neighborhood.safety
    crime_bonus = max(ZERO, (50 - to_decimal(safety.crime_rate)) / 50) * 10
    return clamp(to_decimal(safety.safety_score) + crime_bonus)


def amenities_score(preferences: UserPreferences, neighborhood: Neighborhood) -> Decimal:
    total = to_decimal(neighborhood.amenities.total)
    return min(HUNDRED, total / AMENITY_SATURATION * 100)


def transportation_score(preferences: UserPreferences, neighborhood: Neighborhood) -> Decimal:
    t = neighborhood.transportation
    blended = (
        clamp(t.walkability_score) * Decimal("0.4")
        + clamp(t.transit_score) * Decimal("0.3")
        + clamp(t.bike_score) * Decimal("0.3")
    )
    return round_half_up(blended)


def lifestyle_score(preferences: UserPreferences, neighborhood: Neighborhood) -> Decimal:
    profile = preferences.lifestyle
    age = age_group_compatibility(profile.age_group, neighborhood.demographics)
    activity = activity_compatibility(profile.activity_level, neighborhood.lifestyle)
    social = social_compatibility(profile.social_preference, neighborhood.lifestyle)
    return round_half_up(age * Decimal("0.3") + activity * Decimal("0.3") + social * Decimal("0.4"))


def affordability_score(preferences: UserPreferences, neighborhood: Neighborhood) -> Decimal:
    budget = preferences.budget
    budget_max = to_decimal(budget.max)
    cost = estimated_housing_cost(neighborhood)

    if to_decimal(budget.min) <= cost <= budget_max:
        return Decimal("100")
    if cost <= budget_max * Decimal("1.2"):
        return Decimal("80")  # slightly over budget
    if cost <= budget_max * Decimal("1.5"):
        return Decimal("50")
    return Decimal("20")


def family_friendly_score(preferences: UserPreferences, neighborhood: Neighborhood) -> Decimal:
    amenities = neighborhood.amenities
    demographics = neighborhood.demographics

    schools = min(Decimal("25"), to_decimal(amenities.schools) * 5)
    outdoors = min(
        Decimal("25"),
        (to_decimal(amenities.parks) + clamp(neighborhood.lifestyle.family_activities)) * 2,
    )
    families = _population_share(
        demographics.age_groups.under_18 + demographics.age_groups.age_35_to_49,
        demographics,
    )
    return round_half_up(schools + outdoors + families * 50)


def nightlife_score(preferences: UserPreferences, neighborhood: Neighborhood) -> Decimal:
    amenities = neighborhood.amenities
    venues = min(Decimal("40"), to_decimal(amenities.bars + amenities.restaurants) * 2)
    return round_half_up(venues + clamp(neighborhood.lifestyle.nightlife) * Decimal("0.6"))


def quietness_score(preferences: UserPreferences, neighborhood: Neighborhood) -> Decimal:
    noise = (
        clamp(neighborhood.lifestyle.nightlife)
        + to_decimal(neighborhood.amenities.entertainment)
    ) / 2
    return round_half_up(max(ZERO, HUNDRED - noise))


SubScorer = Callable[[UserPreferences, Neighborhood], Decimal]

# Field order of SubScores and Priorities; also the aggregation order.
SCORERS: dict[str, SubScorer] = {
    "safety": safety_score,
    "amenities": amenities_score,
    "transportation": transportation_score,
    "lifestyle": lifestyle_score,
    "affordability": affordability_score,
    "family_friendly": family_friendly_score,
    "nightlife": nightlife_score,
    "quietness": quietness_score,
}


def compute_sub_scores(preferences: UserPreferences, neighborhood: Neighborhood) -> SubScores:
    """Run all eight calculators against one neighborhood."""
    return SubScores(**{
        name: scorer(preferences, neighborhood) for name, scorer in SCORERS.items()
    })
