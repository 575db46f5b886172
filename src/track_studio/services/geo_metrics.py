"""Geodesic distance, elevation and pace calculations for routes."""

import math
from collections.abc import Sequence

from track_studio.constants import (
    EARTH_RADIUS_M,
    KM_PER_MILE,
    MILES_PER_KM,
    SPEED_LABELS,
    UNIT_LABELS,
)
from track_studio.models.schemas import (
    ActivityProfile,
    PaceAndDuration,
    RouteStats,
    TrackPoint,
)


def km_to_miles(km: float) -> float:
    return km * MILES_PER_KM


def miles_to_km(miles: float) -> float:
    return miles * KM_PER_MILE


def to_km(distance: float, units: str) -> float:
    """Convert a distance in the given units to kilometers."""
    return miles_to_km(distance) if units == "mi" else distance


def distance_meters(a: TrackPoint, b: TrackPoint) -> float:
    """Great-circle (haversine) distance between two points, in meters."""
    lat1, lon1 = math.radians(a[0]), math.radians(a[1])
    lat2, lon2 = math.radians(b[0]), math.radians(b[1])
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(h)))


def segment_distances(points: Sequence[TrackPoint]) -> list[float]:
    """Distances in meters between consecutive points."""
    return [distance_meters(points[i - 1], points[i]) for i in range(1, len(points))]


def route_distance(points: Sequence[TrackPoint], units: str = "km") -> float:
    """Total route length in km, or miles when units is "mi"."""
    if len(points) < 2:
        return 0.0

    km = sum(segment_distances(points)) / 1000
    return km_to_miles(km) if units == "mi" else km


def elevation_gain(elevations: Sequence[float]) -> int:
    """Sum of positive elevation changes, rounded to whole meters."""
    if len(elevations) < 2:
        return 0

    gain = 0.0
    for previous, current in zip(elevations, elevations[1:]):
        diff = current - previous
        if diff > 0:
            gain += diff
    return round(gain)


def speed_to_kmh(speed: float, units: str) -> float:
    """Convert a speed in km/h or mph to km/h."""
    return miles_to_km(speed) if units == "mi" else speed


def seconds_per_km(pace_min: float, pace_sec: int, pace_format: str) -> float:
    """Convert a min:sec pace in the given format to seconds per km."""
    input_seconds = pace_min * 60 + pace_sec
    if pace_format == "min/mi":
        return input_seconds / MILES_PER_KM
    return input_seconds


def format_duration(seconds: float) -> str:
    """Format seconds as zero-padded HH:MM:SS."""
    total = max(0, math.floor(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_pace(pace_min: float, pace_sec: int, pace_format: str) -> str:
    return f"{int(pace_min)}:{int(pace_sec):02d} {pace_format}"


def format_speed(speed: float, units: str) -> str:
    return f"{speed:g} {SPEED_LABELS[units]}"


def pace_and_duration(
    distance: float,
    activity_type: str,
    pace_min: float,
    pace_sec: int,
    units: str,
    pace_format: str,
) -> PaceAndDuration:
    """Compute the pace display and expected duration of a route.

    Args:
        distance: Route distance in ``units``
        activity_type: Activity type; cycling reads ``pace_min`` as a speed
        pace_min: Pace minutes per unit, or speed for cycling
        pace_sec: Pace seconds (ignored for cycling)
        units: "km" or "mi"
        pace_format: "min/km" or "min/mi"

    Returns:
        PaceAndDuration with display strings and duration in seconds
    """
    distance_km = to_km(distance, units)

    if activity_type == "cycling":
        speed_kmh = speed_to_kmh(pace_min, units)
        duration_seconds = distance_km / speed_kmh * 3600 if speed_kmh > 0 else 0.0
        pace_display = format_speed(pace_min, units)
    else:
        duration_seconds = distance_km * seconds_per_km(pace_min, pace_sec, pace_format)
        pace_display = format_pace(pace_min, pace_sec, pace_format)

    return PaceAndDuration(
        pace_display=pace_display,
        duration_display=format_duration(duration_seconds),
        duration_seconds=duration_seconds,
    )


def route_stats(
    points: Sequence[TrackPoint],
    elevations: Sequence[float],
    profile: ActivityProfile,
) -> RouteStats:
    """Build the stats panel strings for a route and profile."""
    unit_label = UNIT_LABELS[profile.units]

    if len(points) < 2:
        return RouteStats(
            distance=f"0.00 {unit_label}",
            elevation="0 m",
            pace=f"0:00 {profile.pace_format}",
            duration="00:00:00",
        )

    distance = route_distance(points, profile.units)
    timing = pace_and_duration(
        distance,
        profile.activity_type,
        profile.pace_min,
        profile.pace_sec,
        profile.units,
        profile.pace_format,
    )

    return RouteStats(
        distance=f"{distance:.2f} {unit_label}",
        elevation=f"{elevation_gain(elevations)} m",
        pace=timing.pace_display,
        duration=timing.duration_display,
    )
