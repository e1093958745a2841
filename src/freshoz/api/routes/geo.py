"""Geocoding and distance endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from freshoz.api.dependencies import get_resolver_dependency
from freshoz.schemas import Address, Coordinates, DistanceRequest, DistanceResponse
from freshoz.services.geocoding import Resolver
from freshoz.utils.geo import haversine_distance, km_to_miles

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/geocode/resolve", response_model=Coordinates)
async def resolve_address(
    address: Address,
    resolver: Resolver = Depends(get_resolver_dependency),
) -> Coordinates:
    """
    Convert a delivery address to coordinates.

    Returns 422 when the configured geocoder cannot resolve the address.
    """
    coordinates = await resolver.resolve(address)
    if coordinates is None:
        raise HTTPException(status_code=422, detail="Could not resolve address")
    return coordinates


@router.post("/distance", response_model=DistanceResponse)
async def get_distance(request: DistanceRequest) -> DistanceResponse:
    """Straight-line distance between two points."""
    distance_km = haversine_distance(request.origin, request.destination)
    return DistanceResponse(
        distance_km=round(distance_km, 2),
        distance_miles=round(km_to_miles(distance_km), 2),
    )
