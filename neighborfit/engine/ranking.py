"""Filtering and ordering of neighborhoods and matching results.

Filters never reorder: kept items stay in their original relative order.
Sorting by compatibility is a separate, explicit step (rank_results).
"""

from dataclasses import dataclass
from typing import Iterable

from neighborfit.models.neighborhood import Neighborhood
from neighborfit.models.results import MatchingResult


@dataclass(frozen=True)
class NeighborhoodFilter:
    """Caller-supplied constraints. A None field does not constrain."""

    search: str | None = None  # case-insensitive substring of name or city
    min_safety_score: float | None = None
    min_walkability_score: float | None = None
    max_crime_rate: float | None = None
    min_amenities: int | None = None

    def matches(self, neighborhood: Neighborhood) -> bool:
        if self.search:
            term = self.search.lower()
            city = (neighborhood.location.city or "").lower()
            if term not in neighborhood.name.lower() and term not in city:
                return False
        if self.min_safety_score is not None and neighborhood.safety.safety_score < self.min_safety_score:
            return False
        if (
            self.min_walkability_score is not None
            and neighborhood.transportation.walkability_score < self.min_walkability_score
        ):
            return False
        if self.max_crime_rate is not None and neighborhood.safety.crime_rate > self.max_crime_rate:
            return False
        if self.min_amenities is not None and neighborhood.amenities.total < self.min_amenities:
            return False
        return True


def filter_neighborhoods(
    neighborhoods: Iterable[Neighborhood], criteria: NeighborhoodFilter
) -> list[Neighborhood]:
    return [n for n in neighborhoods if criteria.matches(n)]


def filter_results(
    results: Iterable[MatchingResult], criteria: NeighborhoodFilter
) -> list[MatchingResult]:
    return [r for r in results if criteria.matches(r.neighborhood)]


def rank_results(results: Iterable[MatchingResult], limit: int | None = None) -> list[MatchingResult]:
    """Sort by compatibility, best first. Ties keep their input order."""
    ranked = sorted(results, key=lambda r: r.compatibility_score, reverse=True)
    if limit is not None:
        return ranked[:limit]
    return ranked
