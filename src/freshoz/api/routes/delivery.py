"""Delivery endpoints."""

from fastapi import APIRouter, Depends

from freshoz.api.dependencies import get_resolver_dependency
from freshoz.schemas import AssignmentResult, AssignOrderRequest
from freshoz.services.geocoding import Resolver
from freshoz.services.rider_assignment import assign_order

router = APIRouter()


@router.post("/orders/assign", response_model=AssignmentResult)
async def assign_order_to_rider(
    request: AssignOrderRequest,
    resolver: Resolver = Depends(get_resolver_dependency),
) -> AssignmentResult:
    """
    Assign an order to the nearest available rider.

    Always returns 200; check ``success`` and ``message`` for the outcome.
    """
    return await assign_order(request.order_id, request.address, request.riders, resolver)
