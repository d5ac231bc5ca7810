"""User preference profile types."""

from dataclasses import dataclass, field, fields
from enum import Enum

from neighborfit.models.neighborhood import Location


class AgeGroup(Enum):
    YOUNG = "young"
    FAMILY = "family"
    SENIOR = "senior"
    MIXED = "mixed"


class ActivityLevel(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SocialPreference(Enum):
    INTROVERT = "introvert"
    EXTROVERT = "extrovert"
    BALANCED = "balanced"


class WorkStyle(Enum):
    REMOTE = "remote"
    OFFICE = "office"
    HYBRID = "hybrid"


@dataclass(frozen=True)
class Budget:
    min: int
    max: int


@dataclass(frozen=True)
class Priorities:
    """Importance weights per scoring dimension (nominally 1-10).

    None means "not supplied" and resolves to the default weight.
    0 means "ignore this dimension".
    """

    safety: int | None = None
    amenities: int | None = None
    transportation: int | None = None
    lifestyle: int | None = None
    affordability: int | None = None
    family_friendly: int | None = None
    nightlife: int | None = None
    quietness: int | None = None

    def as_dict(self) -> dict[str, int | None]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class LifestyleProfile:
    age_group: AgeGroup = AgeGroup.MIXED
    activity_level: ActivityLevel = ActivityLevel.MEDIUM
    social_preference: SocialPreference = SocialPreference.BALANCED
    work_style: WorkStyle = WorkStyle.HYBRID  # not used by scoring


@dataclass(frozen=True)
class UserPreferences:
    id: str
    location: Location
    budget: Budget
    priorities: Priorities = field(default_factory=Priorities)
    lifestyle: LifestyleProfile = field(default_factory=LifestyleProfile)
    # Advisory tags; the engine does not enforce them as filters.
    must_haves: tuple[str, ...] = ()
    deal_breakers: tuple[str, ...] = ()
