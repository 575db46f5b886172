"""Configuration settings for Track Studio."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="TRACK_STUDIO_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Upload limits (GPX files are small, 20MB is plenty)
    max_upload_size_bytes: int = 20 * 1024 * 1024
    allowed_extensions: set[str] = {".gpx"}

    # Elevation used when a track point carries none
    default_elevation_m: float = 10.0

    # Shortest route accepted for export (Strava rejects shorter activities)
    min_route_distance_m: float = 100.0

    # GPX output
    gpx_creator: str = "StravaGPXGenerator"
    # Tag of the top-level start timestamp written to generated GPX files.
    # "metadate" is the legacy spelling existing exports carry; set
    # TRACK_STUDIO_METADATA_TIME_TAG=metadata to emit <metadata><time>.
    metadata_time_tag: str = "metadate"

    # Seed for the random source used by chart and GPX synthesis (None = unseeded)
    random_seed: int | None = None


# Global settings instance
settings = Settings()
