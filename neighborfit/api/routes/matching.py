"""Matching routes: score submitted neighborhoods against a profile."""

import logging

from fastapi import APIRouter

from neighborfit.api.schemas import ApiResponse, MatchingRequest, MatchingResultSchema
from neighborfit.config import settings
from neighborfit.engine.matching import match_all
from neighborfit.engine.ranking import filter_results, rank_results

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matching", tags=["matching"])


@router.post("", response_model=ApiResponse[list[MatchingResultSchema]])
async def run_matching(req: MatchingRequest):
    """Match every neighborhood in the request.

    Results come back in request order unless sort is set, in which case
    they are ranked best match first.
    """
    preferences = req.preferences.to_domain()
    results = match_all(
        preferences,
        [n.to_domain() for n in req.neighborhoods],
        max_workers=settings.match_workers,
    )

    if req.filters is not None:
        results = filter_results(results, req.filters.to_domain())
    if req.sort:
        results = rank_results(results, limit=req.limit)
    elif req.limit is not None:
        results = results[: req.limit]

    logger.info(
        "Matched %d of %d neighborhoods for %s",
        len(results), len(req.neighborhoods), preferences.id,
    )
    return ApiResponse[list[MatchingResultSchema]](
        success=True,
        data=[MatchingResultSchema.from_domain(r) for r in results],
    )
