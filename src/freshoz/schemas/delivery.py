"""Pydantic schemas for rider assignment."""

from pydantic import BaseModel, ConfigDict

from freshoz.schemas.geo import Address, Coordinates


class Rider(BaseModel):
    """A delivery rider and their last known position."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    is_available: bool = True
    current_location: Coordinates | None = None


class AssignOrderRequest(BaseModel):
    """Request model for assigning an order to the nearest rider."""

    order_id: str
    address: Address
    riders: list[Rider]


class AssignmentResult(BaseModel):
    """Outcome of a rider assignment attempt."""

    success: bool
    order_id: str
    assigned_rider_id: str | None = None
    distance_km: float | None = None
    message: str
