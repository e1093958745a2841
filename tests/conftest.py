"""Shared test fixtures."""

import pytest
from fastapi import FastAPI

from freshoz.api.routes import delivery, geo, health, maps
from freshoz.schemas import Address, Coordinates, Rider


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without the lifespan hooks, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(geo.router, prefix="/api")
    app.include_router(maps.router, prefix="/api")
    app.include_router(delivery.router, prefix="/api")
    return app


@pytest.fixture
def springfield_address() -> Address:
    return Address(street="1 Main St", city="Springfield", state="IL", zip="62701")


@pytest.fixture
def riders() -> list[Rider]:
    """Riders around downtown Los Angeles, nearest to the mock base point first."""
    return [
        Rider(
            id="rider-near",
            name="Asha",
            current_location=Coordinates(latitude=34.0530, longitude=-118.2440),
        ),
        Rider(
            id="rider-far",
            name="Ben",
            current_location=Coordinates(latitude=34.2000, longitude=-118.5000),
        ),
        Rider(id="rider-unknown", name="Chen", current_location=None),
    ]
