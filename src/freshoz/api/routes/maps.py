"""Google Maps pass-through endpoints used by the address picker."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from freshoz.api.dependencies import get_maps_client
from freshoz.services.maps_client import GoogleMapsClient

router = APIRouter()


@router.get("/geocode")
async def reverse_geocode(
    lat: float | None = Query(None, description="Latitude"),
    lng: float | None = Query(None, description="Longitude"),
    client: GoogleMapsClient = Depends(get_maps_client),
) -> dict[str, Any]:
    """Reverse geocode a point; returns the Geocoding API payload unchanged."""
    if lat is None or lng is None:
        raise HTTPException(status_code=400, detail="Latitude and longitude are required")
    if not client.api_key:
        raise HTTPException(status_code=500, detail="Google Maps API key not configured")

    data = await client.reverse_geocode(lat, lng)
    if data is None:
        raise HTTPException(status_code=500, detail="Failed to reverse geocode")
    return data


@router.get("/places")
async def get_place_details(
    place_id: str | None = Query(None, alias="placeId", description="Google place ID"),
    client: GoogleMapsClient = Depends(get_maps_client),
) -> dict[str, Any]:
    """Place details for an autocomplete selection."""
    if not place_id:
        raise HTTPException(status_code=400, detail="Place ID is required")
    if not client.api_key:
        raise HTTPException(status_code=500, detail="Google Maps API key not configured")

    data = await client.place_details(place_id)
    if data is None:
        raise HTTPException(status_code=500, detail="Failed to fetch place details")
    return data
