"""Nearest-rider assignment for delivery orders."""

import logging

from freshoz.schemas.delivery import AssignmentResult, Rider
from freshoz.schemas.geo import Address, Coordinates
from freshoz.services.geocoding import Resolver
from freshoz.utils.geo import haversine_distance

logger = logging.getLogger(__name__)


def find_nearest_rider(
    origin: Coordinates, riders: list[Rider]
) -> tuple[Rider, float] | None:
    """
    Pick the available rider closest to a point.

    Riders that are unavailable or have no known location are ignored. On a
    tie the rider listed first wins.

    Args:
        origin: Point to measure from (usually the delivery address)
        riders: Candidate riders

    Returns:
        (rider, distance_km) or None if no rider qualifies
    """
    nearest: Rider | None = None
    min_distance = float("inf")

    for rider in riders:
        if not rider.is_available or rider.current_location is None:
            continue
        distance = haversine_distance(origin, rider.current_location)
        if distance < min_distance:
            min_distance = distance
            nearest = rider

    if nearest is None:
        return None
    return nearest, min_distance


async def assign_order(
    order_id: str,
    address: Address,
    riders: list[Rider],
    resolver: Resolver,
) -> AssignmentResult:
    """
    Assign an order to the nearest available rider.

    Args:
        order_id: Order being assigned
        address: Delivery address
        riders: Current rider roster
        resolver: Geocoder for the delivery address

    Returns:
        AssignmentResult; failures are reported with success=False and a message
    """
    order_coordinates = await resolver.resolve(address)
    if order_coordinates is None:
        return AssignmentResult(
            success=False, order_id=order_id, message="Could not geocode order address."
        )

    if not any(rider.is_available for rider in riders):
        return AssignmentResult(
            success=False, order_id=order_id, message="No riders are available right now."
        )

    match = find_nearest_rider(order_coordinates, riders)
    if match is None:
        logger.warning(f"Order {order_id}: available riders have no known location")
        return AssignmentResult(
            success=False,
            order_id=order_id,
            message="No riders with location data are available.",
        )

    rider, distance_km = match
    logger.info(f"Assigned order {order_id} to rider {rider.id} ({distance_km:.2f} km away)")

    return AssignmentResult(
        success=True,
        order_id=order_id,
        assigned_rider_id=rider.id,
        distance_km=round(distance_km, 2),
        message=f"Successfully assigned order to {rider.name}.",
    )
