"""Pydantic schemas for addresses, coordinates and distances."""

from pydantic import BaseModel, ConfigDict, Field


class Address(BaseModel):
    """Structured postal address. Fields are free text and not validated."""

    model_config = ConfigDict(from_attributes=True)

    street: str
    city: str
    state: str
    zip: str

    def canonical(self) -> str:
        """Single-line form used for geocoding: "street, city, state zip"."""
        return f"{self.street}, {self.city}, {self.state} {self.zip}"


class Coordinates(BaseModel):
    """A point in decimal degrees."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class DistanceRequest(BaseModel):
    """Request body for a point-to-point distance."""

    origin: Coordinates
    destination: Coordinates


class DistanceResponse(BaseModel):
    """Great-circle distance between two points."""

    distance_km: float
    distance_miles: float
