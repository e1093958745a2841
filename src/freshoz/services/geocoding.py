"""Address geocoding: deterministic offline mock and Google Geocoding API client."""

import json
import logging
import math
from abc import ABC, abstractmethod
from typing import Any

import httpx

from freshoz.config import Settings
from freshoz.schemas.geo import Address, Coordinates

logger = logging.getLogger(__name__)

# Mock results are scattered around central Los Angeles
BASE_LATITUDE = 34.0522
BASE_LONGITUDE = -118.2437

# Offsets are (hash mod 1000) / 20000, so strictly within ±0.05 degrees
OFFSET_MODULUS = 1000
OFFSET_DIVISOR = 20000


def address_hash(text: str) -> int:
    """
    Signed 32-bit polynomial rolling hash of a string.

    Iterates UTF-16 code units and computes ``h = h * 31 + unit`` with
    two's-complement wraparound, so results agree with Java's
    ``String.hashCode``.

    Args:
        text: String to hash

    Returns:
        Hash in the range [-2**31, 2**31 - 1]

    Example:
        >>> address_hash("hello")
        99162322
    """
    data = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF

    if h & 0x80000000:
        h -= 1 << 32
    return h


def truncated_mod(value: int, modulus: int) -> int:
    """Remainder with the sign of the dividend (C/JavaScript ``%``), unlike Python's ``%``."""
    return int(math.fmod(value, modulus))


def mock_coordinates_for_address(address: Address) -> Coordinates:
    """
    Derive stable pseudo-random coordinates for an address without any network call.

    The latitude offset comes from the low end of the hash and the longitude
    offset from its upper 16 bits (arithmetic shift). Negative hashes give
    negative offsets.

    Raises:
        Any exception from canonicalisation or hashing; callers convert these
        to a missing result.
    """
    full_address = address.canonical()
    h = address_hash(full_address)

    lat_offset = truncated_mod(h, OFFSET_MODULUS) / OFFSET_DIVISOR
    lon_offset = truncated_mod(h >> 16, OFFSET_MODULUS) / OFFSET_DIVISOR

    return Coordinates(
        latitude=BASE_LATITUDE + lat_offset,
        longitude=BASE_LONGITUDE + lon_offset,
    )


class Resolver(ABC):
    """Converts a postal address into coordinates."""

    @abstractmethod
    async def resolve(self, address: Address) -> Coordinates | None:
        """
        Resolve an address.

        Returns None if the address cannot be resolved. Implementations never
        raise for lookup failures.
        """
        ...


class MockResolver(Resolver):
    """Offline resolver returning deterministic coordinates near Los Angeles."""

    async def resolve(self, address: Address) -> Coordinates | None:
        try:
            coordinates = mock_coordinates_for_address(address)
        except Exception as e:
            logger.error(f"Geocoding failed: {e}", exc_info=True)
            return None

        logger.info(f'[Geocoding Mock] Converted address "{address.canonical()}" to coords.')
        return coordinates


class NetworkResolver(Resolver):
    """
    Resolver backed by the Google Geocoding API, with optional Redis caching.

    Any failure (missing key, HTTP error, timeout, empty or malformed
    response) is logged and reported as None.
    """

    BASE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
    CACHE_TTL = 86400

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float = 10.0,
        redis_client: Any | None = None,
    ) -> None:
        """
        Initialize Google geocoding client.

        Args:
            api_key: Google Maps API key
            timeout: Request timeout in seconds
            redis_client: Optional async Redis client for caching results
        """
        self.api_key = api_key
        self.timeout = timeout
        self.redis = redis_client
        if not self.api_key:
            logger.warning("Google Maps API key not configured")

    async def resolve(self, address: Address) -> Coordinates | None:
        if not self.api_key:
            logger.warning("Cannot geocode without Google Maps API key")
            return None

        full_address = address.canonical()
        cache_key = f"geocode:{full_address.lower()}"
        cached = await self._get_from_cache(cache_key)
        if cached is not None:
            logger.debug(f"Geocode cache hit for {cache_key}")
            return cached

        coordinates = await self._fetch_from_api(full_address)
        if coordinates:
            await self._store_in_cache(cache_key, coordinates)
        return coordinates

    async def _fetch_from_api(self, full_address: str) -> Coordinates | None:
        params = {"address": full_address, "key": self.api_key}

        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                response = await client.get(self.BASE_URL, params=params)
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"Geocoding API HTTP error: {e.response.status_code}")
            return None

        except httpx.TimeoutException:
            logger.error("Geocoding API timeout")
            return None

        except Exception as e:
            logger.error(f"Geocoding request failed for '{full_address}': {e}")
            return None

        return self._parse_geocode_response(data, full_address)

    def _parse_geocode_response(self, data: dict, full_address: str) -> Coordinates | None:
        """
        Extract the first result's location from a Geocoding API payload.

        Args:
            data: JSON response from the Geocoding API
            full_address: Address that was looked up (for logging)

        Returns:
            Coordinates or None if the payload has no usable result
        """
        status = data.get("status")
        if status != "OK":
            logger.info(f"No geocoding result for '{full_address}' (status={status})")
            return None

        try:
            location = data["results"][0]["geometry"]["location"]
            return Coordinates(latitude=float(location["lat"]), longitude=float(location["lng"]))
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Failed to parse geocoding response: {e}")
            return None

    async def _get_from_cache(self, key: str) -> Coordinates | None:
        if not self.redis:
            return None

        try:
            cached = await self.redis.get(key)
            if cached:
                return Coordinates(**json.loads(cached))
        except Exception as e:
            logger.warning(f"Redis cache get failed: {e}")

        return None

    async def _store_in_cache(self, key: str, value: Coordinates) -> None:
        if not self.redis:
            return

        try:
            await self.redis.setex(key, self.CACHE_TTL, value.model_dump_json())
        except Exception as e:
            logger.warning(f"Redis cache set failed: {e}")


def get_resolver(settings: Settings, redis_client: Any | None = None) -> Resolver:
    """
    Build the resolver selected by ``settings.geocoder_backend``.

    Raises:
        ValueError: If the backend name is not recognised
    """
    backend = settings.geocoder_backend.lower()
    if backend == "mock":
        return MockResolver()
    if backend == "google":
        return NetworkResolver(
            api_key=settings.google_maps_api_key,
            timeout=settings.geocode_timeout,
            redis_client=redis_client,
        )
    raise ValueError(f"Unknown geocoder backend: {settings.geocoder_backend!r}")
