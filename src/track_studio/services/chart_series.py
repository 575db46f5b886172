"""Synthetic pace and heart-rate series for the route charts."""

import logging
import math
import random
from collections.abc import Sequence

from track_studio.config import settings
from track_studio.constants import (
    ACTIVITY_CONFIGS,
    CHART_SAMPLES_PER_UNIT,
    DEFAULT_VARIANCE_INDEX,
    HR_VARIANCE_STEPS,
    MILES_PER_KM,
    MIN_CHART_SAMPLES,
    PACE_VARIANCE_STEPS,
    SPEED_LABELS,
    SPEED_VARIANCE_STEPS,
    UNIT_LABELS,
)
from track_studio.models.schemas import ActivityProfile, ChartData, ChartSeries, TrackPoint
from track_studio.services.geo_metrics import seconds_per_km

logger = logging.getLogger(__name__)


def step_value(steps: Sequence[float], ordinal: int) -> float:
    """Look up a variance step, falling back to the moderate level."""
    if 0 <= ordinal < len(steps):
        return steps[ordinal]
    return steps[DEFAULT_VARIANCE_INDEX]


def sample_count(distance: float) -> int:
    return max(MIN_CHART_SAMPLES, math.floor(distance * CHART_SAMPLES_PER_UNIT))


def new_rng() -> random.Random:
    """Random source seeded from settings when a seed is configured."""
    return random.Random(settings.random_seed)


class ChartSeriesGenerator:
    """Generates noisy pace/speed and heart-rate series around target values."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or new_rng()

    def _noise(self) -> float:
        return self.rng.uniform(-1, 1)

    def generate(
        self,
        points: Sequence[TrackPoint],
        distance: float,
        activity_type: str,
        pace_min: float,
        pace_sec: int,
        avg_heart_rate: float,
        pace_inconsistency: int,
        hr_variability: int,
        units: str,
        pace_format: str,
    ) -> ChartData | None:
        """Generate chart series for a route.

        Returns None when the route has fewer than 2 points.
        """
        if len(points) < 2:
            return None

        hr_range = ACTIVITY_CONFIGS[activity_type]["hr_range"]
        count = sample_count(distance)
        unit_label = UNIT_LABELS[units]

        labels = [f"{distance / count * (i + 1):.1f} {unit_label}" for i in range(count)]

        if activity_type == "cycling":
            speed_step = step_value(SPEED_VARIANCE_STEPS, pace_inconsistency)
            pace_data = [max(0.0, pace_min + self._noise() * speed_step) for _ in range(count)]
            pace_series = ChartSeries(
                labels=list(labels),
                data=pace_data,
                label=f"Speed ({SPEED_LABELS[units]})",
                value_kind="speed",
                unit=SPEED_LABELS[units],
            )
        else:
            pace_step = step_value(PACE_VARIANCE_STEPS, pace_inconsistency)
            base_min_per_km = seconds_per_km(pace_min, pace_sec, pace_format) / 60
            pace_data = []
            for _ in range(count):
                value = base_min_per_km * (1 + self._noise() * pace_step)
                if pace_format == "min/mi":
                    value *= MILES_PER_KM
                pace_data.append(max(0.0, value))
            pace_series = ChartSeries(
                labels=list(labels),
                data=pace_data,
                label=f"Pace ({pace_format})",
                value_kind="pace",
            )

        hr_step = step_value(HR_VARIANCE_STEPS, hr_variability)
        hr_data = [
            float(
                max(
                    hr_range["min"],
                    min(hr_range["max"], round(avg_heart_rate * (1 + self._noise() * hr_step))),
                )
            )
            for _ in range(count)
        ]
        hr_series = ChartSeries(
            labels=list(labels),
            data=hr_data,
            label="Heart Rate (bpm)",
            value_kind="heart_rate",
            unit="bpm",
        )

        logger.debug(
            f"Generated chart data: {len(pace_series.data)} pace points, "
            f"{len(hr_series.data)} HR points, avg HR {avg_heart_rate}"
        )

        return ChartData(pace=pace_series, heart_rate=hr_series)

    def generate_for_profile(
        self, points: Sequence[TrackPoint], distance: float, profile: ActivityProfile
    ) -> ChartData | None:
        """Generate chart series using the values of an activity profile."""
        return self.generate(
            points,
            distance,
            profile.activity_type,
            profile.pace_min,
            profile.pace_sec,
            profile.avg_heart_rate,
            profile.pace_inconsistency,
            profile.hr_variability,
            profile.units,
            profile.pace_format,
        )
