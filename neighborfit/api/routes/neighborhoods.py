"""Neighborhood lookup routes. Records are generated, never written."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from neighborfit.api.deps import get_neighborhood_source
from neighborfit.api.schemas import ApiResponse, NeighborhoodSchema
from neighborfit.config import settings
from neighborfit.data.base import NeighborhoodSource
from neighborfit.data.mock_neighborhoods import parse_neighborhood_id
from neighborfit.engine.ranking import NeighborhoodFilter, filter_neighborhoods
from neighborfit.models.neighborhood import Location

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/neighborhoods", tags=["neighborhoods"])

READ_ONLY = "Not implemented - neighborhoods are read-only from external data"


@router.get("", response_model=ApiResponse[list[NeighborhoodSchema]])
async def list_neighborhoods(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    radius: float = Query(settings.default_radius_miles, gt=0, le=100),
    search: str | None = None,
    min_safety: float | None = Query(None, ge=0),
    min_walkability: float | None = Query(None, ge=0),
    max_crime_rate: float | None = Query(None, ge=0),
    min_amenities: int | None = Query(None, ge=0),
    source: NeighborhoodSource = Depends(get_neighborhood_source),
):
    """Neighborhoods around a point, optionally narrowed by filters."""
    found = source.find_neighborhoods(
        Location(latitude=lat, longitude=lng),
        radius,
        settings.min_neighborhoods,
        settings.max_neighborhoods,
    )
    criteria = NeighborhoodFilter(
        search=search,
        min_safety_score=min_safety,
        min_walkability_score=min_walkability,
        max_crime_rate=max_crime_rate,
        min_amenities=min_amenities,
    )
    kept = filter_neighborhoods(found, criteria)
    return ApiResponse[list[NeighborhoodSchema]](
        success=True,
        data=[NeighborhoodSchema.from_domain(n) for n in kept],
        message=f"Found {len(kept)} neighborhoods",
    )


@router.get("/{neighborhood_id}", response_model=ApiResponse[NeighborhoodSchema])
async def get_neighborhood(
    neighborhood_id: str,
    source: NeighborhoodSource = Depends(get_neighborhood_source),
):
    """Look a neighborhood up by its neighborhood_<lat>_<lng> id."""
    try:
        location = parse_neighborhood_id(neighborhood_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    neighborhood = source.get_neighborhood(location)
    return ApiResponse[NeighborhoodSchema](
        success=True,
        data=NeighborhoodSchema.from_domain(neighborhood),
    )


@router.post("")
async def create_neighborhood():
    raise HTTPException(status_code=501, detail="Not implemented - neighborhoods are generated from external data")


@router.put("/{neighborhood_id}")
async def update_neighborhood(neighborhood_id: str):
    raise HTTPException(status_code=501, detail=READ_ONLY)


@router.delete("/{neighborhood_id}")
async def delete_neighborhood(neighborhood_id: str):
    raise HTTPException(status_code=501, detail=READ_ONLY)
