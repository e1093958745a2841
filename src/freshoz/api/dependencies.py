"""FastAPI dependencies shared by route modules."""

from freshoz.config import settings
from freshoz.services.geocoding import Resolver, get_resolver
from freshoz.services.maps_client import GoogleMapsClient


def get_resolver_dependency() -> Resolver:
    """Resolver selected by configuration."""
    return get_resolver(settings)


def get_maps_client() -> GoogleMapsClient:
    return GoogleMapsClient()
