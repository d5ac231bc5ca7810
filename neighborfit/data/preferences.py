"""User preference storage and default profiles.

The store is an injected collaborator: the API creates one per process and
hands it to routes through FastAPI dependencies. The scoring engine never
sees it.
"""

import logging
from dataclasses import replace
from typing import Any

from neighborfit.data.base import PreferenceStore
from neighborfit.engine.validation import validate_preferences
from neighborfit.models.neighborhood import Location
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

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = Location(
    latitude=40.7128,
    longitude=-74.0060,
    city="New York",
    state="NY",
    zip_code="10001",
)
DEFAULT_BUDGET = Budget(min=50_000, max=150_000)
DEFAULT_PRIORITIES = Priorities(
    safety=8,
    amenities=7,
    transportation=6,
    lifestyle=7,
    affordability=8,
    family_friendly=5,
    nightlife=6,
    quietness=5,
)
DEFAULT_LIFESTYLE = LifestyleProfile(
    age_group=AgeGroup.MIXED,
    activity_level=ActivityLevel.MEDIUM,
    social_preference=SocialPreference.BALANCED,
    work_style=WorkStyle.HYBRID,
)


class InMemoryPreferenceStore:
    """Dict-backed PreferenceStore. Contents live as long as the instance."""

    def __init__(self) -> None:
        self._profiles: dict[str, UserPreferences] = {}

    def get(self, user_id: str) -> UserPreferences | None:
        return self._profiles.get(user_id)

    def put(self, preferences: UserPreferences) -> None:
        self._profiles[preferences.id] = preferences

    def delete(self, user_id: str) -> bool:
        return self._profiles.pop(user_id, None) is not None

    def user_ids(self) -> list[str]:
        return list(self._profiles)

    def clear(self) -> None:
        self._profiles.clear()


def default_preferences(user_id: str) -> UserPreferences:
    return UserPreferences(
        id=user_id,
        location=DEFAULT_LOCATION,
        budget=DEFAULT_BUDGET,
        priorities=DEFAULT_PRIORITIES,
        lifestyle=DEFAULT_LIFESTYLE,
        must_haves=("Grocery store nearby", "Public transportation"),
        deal_breakers=("High crime rate", "Poor school ratings"),
    )


def merge_preferences(base: UserPreferences, changes: dict[str, Any]) -> UserPreferences:
    """Apply a partial update to a profile.

    Keys are UserPreferences field names. `priorities` and `lifestyle` take a
    dict of their own fields and are merged field by field; other values
    replace the stored value outright. None means "leave as is", so an explicit
    0 weight survives the merge.
    """
    updates: dict[str, Any] = {}
    for key, value in changes.items():
        if value is None:
            continue
        if key in ("priorities", "lifestyle"):
            nested = {k: v for k, v in value.items() if v is not None}
            updates[key] = replace(getattr(base, key), **nested)
        elif key in ("must_haves", "deal_breakers"):
            updates[key] = tuple(value)
        else:
            updates[key] = value
    return replace(base, **updates)


def get_or_create_preferences(store: PreferenceStore, user_id: str) -> UserPreferences:
    """Stored profile for a user; a new user gets (and keeps) the defaults."""
    preferences = store.get(user_id)
    if preferences is None:
        logger.info("No preferences stored for %s, creating defaults", user_id)
        preferences = default_preferences(user_id)
        store.put(preferences)
    return preferences


def save_preferences(store: PreferenceStore, user_id: str, changes: dict[str, Any]) -> UserPreferences:
    """Merge changes over the stored profile (or the defaults) and store it.

    The merged profile is validated before it replaces the stored one.
    """
    base = store.get(user_id) or default_preferences(user_id)
    updated = merge_preferences(base, changes)
    validate_preferences(updated)
    store.put(updated)
    return updated
