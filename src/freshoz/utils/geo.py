"""Geolocation utilities for distance calculations."""

import math

from freshoz.schemas.geo import Coordinates

# Mean Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0

KM_TO_MILES = 0.621371


def calculate_haversine_distance(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points using the Haversine formula.

    Inputs must be finite decimal degrees within the valid latitude/longitude
    ranges; they are not checked.

    Args:
        lat1: Latitude of first point in decimal degrees
        lon1: Longitude of first point in decimal degrees
        lat2: Latitude of second point in decimal degrees
        lon2: Longitude of second point in decimal degrees

    Returns:
        Distance in kilometers (float)

    Example:
        >>> # Los Angeles to New York (~3940km)
        >>> distance = calculate_haversine_distance(34.0522, -118.2437, 40.7128, -74.0060)
        >>> 3935 < distance < 3945
        True
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)

    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    # a = sin²(Δφ/2) + cos(φ1)×cos(φ2)×sin²(Δλ/2)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def haversine_distance(origin: Coordinates, destination: Coordinates) -> float:
    """Distance in kilometers between two coordinate pairs."""
    return calculate_haversine_distance(
        origin.latitude, origin.longitude, destination.latitude, destination.longitude
    )


def km_to_miles(distance_km: float) -> float:
    return distance_km * KM_TO_MILES
