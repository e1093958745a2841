"""Google Maps Platform client for reverse geocoding and place details."""

import logging
from typing import Any

import httpx

from freshoz.config import settings

logger = logging.getLogger(__name__)


class GoogleMapsClient:
    """Thin pass-through client; responses are returned as Google sends them."""

    BASE_URL = "https://maps.googleapis.com/maps/api"

    def __init__(self, api_key: str | None = None, timeout: float | None = None) -> None:
        """
        Initialize Google Maps client.

        Args:
            api_key: Google Maps API key (uses settings if not provided)
            timeout: Request timeout in seconds (uses settings if not provided)
        """
        self.api_key = api_key or settings.google_maps_api_key
        self.timeout = timeout or settings.geocode_timeout
        if not self.api_key:
            logger.warning("Google Maps API key not configured")

    async def reverse_geocode(self, lat: float, lng: float) -> dict[str, Any] | None:
        """
        Look up addresses for a point.

        Args:
            lat: Latitude in decimal degrees
            lng: Longitude in decimal degrees

        Returns:
            Geocoding API payload or None if error
        """
        if not self.api_key:
            logger.warning("Cannot reverse geocode without Google Maps API key")
            return None

        params = {"latlng": f"{lat},{lng}", "key": self.api_key}
        return await self._get("/geocode/json", params, f"reverse geocode {lat},{lng}")

    async def place_details(self, place_id: str) -> dict[str, Any] | None:
        """
        Fetch details for a place ID (from address autocomplete).

        Args:
            place_id: Google place ID

        Returns:
            Places API payload or None if error
        """
        if not self.api_key:
            logger.warning("Cannot fetch place details without Google Maps API key")
            return None

        params = {"place_id": place_id, "key": self.api_key}
        return await self._get("/place/details/json", params, f"place details {place_id}")

    async def _get(self, path: str, params: dict[str, Any], what: str) -> dict[str, Any] | None:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(f"{self.BASE_URL}{path}", params=params)
                response.raise_for_status()
                return response.json()

        except Exception as e:
            logger.error(f"Google Maps {what} error: {e}")
            return None
