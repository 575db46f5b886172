"""Pydantic models shared by the Track Studio services and API."""

import math
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from track_studio.constants import (
    DEFAULT_ACTIVITY_TYPE,
    DEFAULT_PACE_FORMAT,
    DEFAULT_UNITS,
    SPEED_LABELS,
)

# Type aliases
ActivityType = Literal["running", "walking", "hiking", "cycling"]
Units = Literal["km", "mi"]
PaceFormat = Literal["min/km", "min/mi"]
TimingAccuracy = Literal["low", "medium", "high"]

# (latitude, longitude) in decimal degrees
TrackPoint = tuple[float, float]


class ValueRange(BaseModel):
    """Inclusive numeric range."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float


class ActivityConfig(BaseModel):
    """Static per-activity tuning."""

    model_config = ConfigDict(frozen=True)

    pace_type: Literal["Pace", "Speed"]
    pace_range: ValueRange
    hr_range: ValueRange
    elevation_factor: float
    routing_profile: str


class ActivityProfile(BaseModel):
    """Target activity parameters chosen by the user."""

    activity_type: ActivityType = DEFAULT_ACTIVITY_TYPE
    units: Units = DEFAULT_UNITS
    pace_format: PaceFormat = DEFAULT_PACE_FORMAT

    # Pace as minutes + seconds per unit; for cycling pace_min is the speed
    pace_min: float = Field(default=5, ge=0)
    pace_sec: int = Field(default=30, ge=0, lt=60)

    avg_heart_rate: int = Field(default=150, gt=0, description="Average heart rate (bpm)")
    pace_inconsistency: int = Field(default=1, ge=0, le=3, description="Pace noise level (0-3)")
    hr_variability: int = Field(default=1, ge=0, le=2, description="Heart rate noise level (0-2)")

    # Used when synthesizing a GPX file
    name: str = "Afternoon Run"
    description: str = "A great run today!"
    date: str | None = Field(default=None, description="Activity date (YYYY-MM-DD)")
    start_time: str | None = Field(default=None, description="Start time (HH:MM or HH:MM:SS)")


class Pace(BaseModel):
    """Pace split into minutes and seconds per km."""

    model_config = ConfigDict(frozen=True)

    minutes: int
    seconds: int


class DataQuality(BaseModel):
    """Coarse indicator of how far timing-derived statistics can be trusted."""

    model_config = ConfigDict(frozen=True)

    point_count: int
    has_detailed_timing: bool
    has_heart_rate_data: bool
    timing_accuracy: TimingAccuracy


class ActivityMetadata(BaseModel):
    """Metadata derived from a parsed GPX file."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    start_time: datetime

    # Timing-derived values, None when the track has no usable timing
    distance: float | None = Field(default=None, description="Distance in km")
    duration: float | None = Field(default=None, description="Duration in seconds")
    pace: Pace | None = None
    data_quality: DataQuality | None = None

    avg_heart_rate: int | None = None
    hr_variability: int | None = None
    pace_inconsistency: int = 0


class ParsedTrack(BaseModel):
    """Track point series with parallel per-point arrays."""

    points: list[TrackPoint] = Field(default_factory=list)
    elevations: list[float] = Field(default_factory=list)
    timestamps: list[datetime | None] = Field(default_factory=list)
    heart_rates: list[int | None] = Field(default_factory=list)
    metadata: ActivityMetadata | None = None


class PaceAndDuration(BaseModel):
    """Pace display and expected duration for a route."""

    pace_display: str
    duration_display: str
    duration_seconds: float


class RouteStats(BaseModel):
    """Display strings for the stats panel."""

    distance: str
    elevation: str
    pace: str
    duration: str


class ChartSeries(BaseModel):
    """One synthetic series ready for plotting."""

    labels: list[str]
    data: list[float]
    label: str
    value_kind: Literal["pace", "speed", "heart_rate"]
    unit: str = ""

    def format_value(self, value: float) -> str:
        """Format a value the way chart ticks display it."""
        if self.value_kind == "pace":
            minutes = math.floor(value)
            seconds = round((value - minutes) * 60)
            return f"{minutes}:{seconds:02d}"
        if self.value_kind == "speed":
            return f"{value:.1f} {self.unit}"
        return f"{round(value)} bpm"


class ChartData(BaseModel):
    """Pace (or speed) and heart rate series."""

    pace: ChartSeries
    heart_rate: ChartSeries


class ImportReport(BaseModel):
    """User-facing summary of a GPX import."""

    message: str
    warnings: list[str] = Field(default_factory=list)


# =============================================================================
# API request/response models
# =============================================================================


class RouteRequest(BaseModel):
    """Route drawn in the UI plus the current activity profile."""

    points: list[TrackPoint]
    elevations: list[float] = Field(default_factory=list)
    profile: ActivityProfile = Field(default_factory=ActivityProfile)


class ImportResponse(BaseModel):
    """Response from the GPX import endpoint."""

    track: ParsedTrack
    report: ImportReport
    detected_activity_type: ActivityType | None = None
    profile: ActivityProfile


class ActivityOption(BaseModel):
    """Activity type with its configuration and default profile."""

    activity_type: ActivityType
    config: ActivityConfig
    default_profile: ActivityProfile


class ActivityOptionsResponse(BaseModel):
    """Response from the activity options endpoint."""

    activities: list[ActivityOption]
    speed_labels: dict[str, str] = Field(default_factory=lambda: dict(SPEED_LABELS))
