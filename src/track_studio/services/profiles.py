"""Activity profile helpers: configs, defaults and imported values."""

from track_studio.constants import (
    ACTIVITY_CONFIGS,
    DEFAULT_CYCLING_SPEED,
    DEFAULT_PACE_SECONDS,
    KM_PER_MILE,
    PACE_FORMAT_FOR_UNITS,
)
from track_studio.models.schemas import ActivityConfig, ActivityMetadata, ActivityProfile
from track_studio.services.geo_metrics import km_to_miles, seconds_per_km, speed_to_kmh


def get_activity_config(activity_type: str) -> ActivityConfig:
    """Return the static configuration for an activity type."""
    if activity_type not in ACTIVITY_CONFIGS:
        raise ValueError(f"Unknown activity type: {activity_type}")
    return ActivityConfig.model_validate(ACTIVITY_CONFIGS[activity_type])


def default_profile(activity_type: str, units: str = "km") -> ActivityProfile:
    """Profile with the defaults the UI selects for an activity type."""
    config = get_activity_config(activity_type)

    if activity_type == "cycling":
        pace_min, pace_sec = DEFAULT_CYCLING_SPEED, 0
    else:
        pace_min = round((config.pace_range.min + config.pace_range.max) / 2)
        pace_sec = DEFAULT_PACE_SECONDS

    return ActivityProfile(
        activity_type=activity_type,
        units=units,
        pace_format=PACE_FORMAT_FOR_UNITS[units],
        pace_min=pace_min,
        pace_sec=pace_sec,
        avg_heart_rate=round((config.hr_range.min + config.hr_range.max) / 2),
    )


def _imported_pace(profile: ActivityProfile, pace_seconds_km: int) -> dict:
    """Profile pace fields for a min/km pace, in the profile's own units."""
    if profile.activity_type == "cycling":
        speed_kmh = 3600 / pace_seconds_km
        speed = km_to_miles(speed_kmh) if profile.units == "mi" else speed_kmh
        return {"pace_min": round(speed, 1), "pace_sec": 0}

    if profile.pace_format == "min/mi":
        pace_seconds = round(pace_seconds_km * KM_PER_MILE)
    else:
        pace_seconds = pace_seconds_km
    minutes, seconds = divmod(pace_seconds, 60)
    return {"pace_min": minutes, "pace_sec": seconds}


def profile_from_metadata(profile: ActivityProfile, metadata: ActivityMetadata) -> ActivityProfile:
    """Copy of ``profile`` updated with the values found in imported metadata.

    The imported pace is per km; it is converted to min/mi or, for cycling,
    to a speed in the profile's units.
    """
    updates: dict = {
        "name": metadata.name,
        "description": metadata.description,
        "date": metadata.start_time.strftime("%Y-%m-%d"),
        "start_time": metadata.start_time.strftime("%H:%M"),
        "pace_inconsistency": metadata.pace_inconsistency,
    }
    if metadata.pace is not None:
        pace_seconds_km = metadata.pace.minutes * 60 + metadata.pace.seconds
        if pace_seconds_km > 0:
            updates.update(_imported_pace(profile, pace_seconds_km))
    if metadata.avg_heart_rate:
        updates["avg_heart_rate"] = metadata.avg_heart_rate
    if metadata.hr_variability is not None:
        updates["hr_variability"] = metadata.hr_variability

    return ActivityProfile.model_validate(profile.model_dump() | updates)


def avg_pace_seconds_per_km(profile: ActivityProfile) -> float:
    """Target pace of a profile in seconds per km."""
    if profile.activity_type == "cycling":
        speed_kmh = speed_to_kmh(profile.pace_min, profile.units)
        if speed_kmh <= 0:
            raise ValueError("Speed must be greater than zero")
        return 3600 / speed_kmh
    return seconds_per_km(profile.pace_min, profile.pace_sec, profile.pace_format)
