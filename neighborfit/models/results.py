from dataclasses import dataclass, field, fields
from decimal import Decimal

from neighborfit.models.neighborhood import Neighborhood


@dataclass(frozen=True)
class SubScores:
    """Per-dimension compatibility scores, each 0-100."""

    safety: Decimal = Decimal("0")
    amenities: Decimal = Decimal("0")
    transportation: Decimal = Decimal("0")
    lifestyle: Decimal = Decimal("0")
    affordability: Decimal = Decimal("0")
    family_friendly: Decimal = Decimal("0")
    nightlife: Decimal = Decimal("0")
    quietness: Decimal = Decimal("0")

    def as_dict(self) -> dict[str, Decimal]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class Explanation:
    reasons: list[str] = field(default_factory=list)
    concerns: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class MatchingResult:
    neighborhood: Neighborhood
    compatibility_score: int  # 0-100
    match_reasons: list[str] = field(default_factory=list)
    potential_concerns: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    sub_scores: SubScores = field(default_factory=SubScores)
