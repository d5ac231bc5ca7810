"""Compatibility scoring entry points.

score()     -> overall 0-100 compatibility
explain()   -> match reasons, concerns, recommendations
match()     -> both, as a MatchingResult
match_all() -> one MatchingResult per neighborhood, in input order

All of these are pure: no state is kept between calls, so batches can be
scored on a thread pool without locking.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from neighborfit.engine.aggregate import aggregate_score
from neighborfit.engine.explain import build_explanation
from neighborfit.engine.subscores import compute_sub_scores
from neighborfit.engine.validation import validate_neighborhood, validate_preferences
from neighborfit.models.neighborhood import Neighborhood
from neighborfit.models.preferences import UserPreferences
from neighborfit.models.results import Explanation, MatchingResult

logger = logging.getLogger(__name__)


def score(preferences: UserPreferences, neighborhood: Neighborhood) -> int:
    validate_preferences(preferences)
    validate_neighborhood(neighborhood)
    return aggregate_score(compute_sub_scores(preferences, neighborhood), preferences.priorities)


def explain(preferences: UserPreferences, neighborhood: Neighborhood) -> Explanation:
    validate_preferences(preferences)
    validate_neighborhood(neighborhood)
    return build_explanation(preferences, neighborhood)


def _match_validated(preferences: UserPreferences, neighborhood: Neighborhood) -> MatchingResult:
    sub_scores = compute_sub_scores(preferences, neighborhood)
    compatibility = aggregate_score(sub_scores, preferences.priorities)
    explanation = build_explanation(preferences, neighborhood)

    logger.debug(
        "Scored %s for %s: %d %s", neighborhood.id, preferences.id, compatibility, sub_scores
    )
    return MatchingResult(
        neighborhood=neighborhood,
        compatibility_score=compatibility,
        match_reasons=explanation.reasons,
        potential_concerns=explanation.concerns,
        recommendations=explanation.recommendations,
        sub_scores=sub_scores,
    )


def match(preferences: UserPreferences, neighborhood: Neighborhood) -> MatchingResult:
    """Score and explain one neighborhood against a preference profile."""
    validate_preferences(preferences)
    validate_neighborhood(neighborhood)
    return _match_validated(preferences, neighborhood)


def match_all(
    preferences: UserPreferences,
    neighborhoods: Iterable[Neighborhood],
    max_workers: int | None = None,
) -> list[MatchingResult]:
    """Match every neighborhood, preserving input order.

    Every record is validated before any is scored, so a bad record rejects
    the whole batch. With max_workers > 1 scoring runs on a thread pool; the
    results are identical to the sequential path.
    """
    validate_preferences(preferences)
    neighborhoods = list(neighborhoods)
    for neighborhood in neighborhoods:
        validate_neighborhood(neighborhood)

    if max_workers is not None and max_workers > 1 and len(neighborhoods) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            return list(pool.map(lambda n: _match_validated(preferences, n), neighborhoods))

    return [_match_validated(preferences, n) for n in neighborhoods]
