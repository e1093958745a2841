"""Pydantic schemas for API requests and responses."""

from freshoz.schemas.delivery import AssignmentResult, AssignOrderRequest, Rider
from freshoz.schemas.geo import Address, Coordinates, DistanceRequest, DistanceResponse

__all__ = [
    "Address",
    "Coordinates",
    "DistanceRequest",
    "DistanceResponse",
    "Rider",
    "AssignOrderRequest",
    "AssignmentResult",
]
