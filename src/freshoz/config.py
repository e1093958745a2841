"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Geocoding: "mock" (offline, deterministic) or "google"
    geocoder_backend: str = "mock"

    # Google Maps Platform (geocoding, reverse geocoding, place details)
    google_maps_api_key: str = ""
    geocode_timeout: float = 10.0

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:9002",
        "capacitor://localhost",
    ]

    log_level: str = "INFO"


# Global settings instance
settings = Settings()
