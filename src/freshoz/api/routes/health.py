"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Liveness probe for the load balancer and the mobile app."""
    return {"status": "ok"}
