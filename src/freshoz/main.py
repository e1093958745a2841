"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from freshoz.api.routes import delivery, geo, health, maps
from freshoz.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(message)s")
    logger.info(f"Freshoz geo API starting with '{settings.geocoder_backend}' geocoder")
    yield
    logger.info("Freshoz geo API shut down")


# Create FastAPI app
app = FastAPI(
    title="Freshoz Geo API",
    description="Geocoding, distance and rider assignment for Freshoz grocery delivery",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,  # Web storefront and Capacitor shell
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(geo.router, prefix="/api", tags=["geo"])
app.include_router(maps.router, prefix="/api", tags=["maps"])
app.include_router(delivery.router, prefix="/api", tags=["delivery"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("freshoz.main:app", host=settings.api_host, port=settings.api_port)
