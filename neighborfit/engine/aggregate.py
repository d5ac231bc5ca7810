"""Weighted aggregation of sub-scores into one compatibility score.

Weight resolution per dimension:
  None -> DEFAULT_WEIGHT (not supplied)
  0    -> dimension ignored (excluded from the total weight)
  n    -> n

If every dimension is ignored the total weight is zero; the aggregate then
falls back to the unweighted mean of all eight sub-scores.
"""

import logging
from decimal import Decimal

from neighborfit.engine.subscores import clamp, round_half_up, to_decimal
from neighborfit.models.preferences import Priorities
from neighborfit.models.results import SubScores

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT = 5


def resolve_weights(priorities: Priorities) -> dict[str, Decimal]:
    """Map each dimension to its effective weight."""
    return {
        name: to_decimal(DEFAULT_WEIGHT if weight is None else weight)
        for name, weight in priorities.as_dict().items()
    }


def aggregate_score(sub_scores: SubScores, priorities: Priorities) -> int:
    """Weighted mean of the sub-scores, rounded half-up and clamped to 0-100."""
    scores = {name: clamp(score) for name, score in sub_scores.as_dict().items()}
    weights = resolve_weights(priorities)
    total_weight = sum(weights.values(), Decimal("0"))

    if total_weight == 0:
        logger.warning("All priority weights are zero, using unweighted mean")
        mean = sum(scores.values(), Decimal("0")) / len(scores)
        return int(round_half_up(clamp(mean)))

    weighted = sum(
        (scores[name] * weights[name] for name in scores),
        Decimal("0"),
    )
    return int(round_half_up(clamp(weighted / total_weight)))
