"""Variability classification of heart-rate and pace samples.

Raw samples are reduced to a coefficient of variation (population standard
deviation over mean) and mapped onto the same ordinal levels the UI sliders
use, so an imported track can pre-fill the synthesis profile.
"""

import logging
import statistics
from collections.abc import Sequence
from datetime import datetime

from track_studio.constants import (
    DEFAULT_HR_VARIABILITY,
    DEFAULT_PACE_INCONSISTENCY,
    HR_CV_THRESHOLDS,
    MIN_PACE_SEGMENT_M,
    MIN_VARIABILITY_SAMPLES,
    NO_TIMING_PACE_INCONSISTENCY,
    PACE_CV_THRESHOLDS,
)
from track_studio.models.schemas import TrackPoint
from track_studio.services.geo_metrics import distance_meters

logger = logging.getLogger(__name__)


def coefficient_of_variation(samples: Sequence[float]) -> float:
    """Population standard deviation divided by the mean."""
    mean = statistics.fmean(samples)
    if mean == 0:
        return 0.0
    return statistics.pstdev(samples, mu=mean) / mean


def classify_coefficient_of_variation(
    samples: Sequence[float], thresholds: Sequence[float]
) -> int:
    """Map the CV of samples to the smallest ordinal whose threshold is not exceeded.

    With N thresholds the result is in 0..N; N is the catch-all level.
    """
    cv = coefficient_of_variation(samples)
    for ordinal, threshold in enumerate(thresholds):
        if cv <= threshold:
            return ordinal
    return len(thresholds)


def valid_heart_rates(heart_rates: Sequence[int | None]) -> list[int]:
    return [hr for hr in heart_rates if hr is not None and hr > 0]


def classify_hr_variability(heart_rates: Sequence[int | None]) -> int | None:
    """Classify heart-rate variability into levels 0-2.

    Returns None without any valid reading, and the moderate default when
    there are too few readings for a stable estimate.
    """
    samples = valid_heart_rates(heart_rates)
    if not samples:
        return None

    if len(samples) < MIN_VARIABILITY_SAMPLES:
        logger.warning(
            f"Limited HR data ({len(samples)} points). Using default variability."
        )
        return DEFAULT_HR_VARIABILITY

    return classify_coefficient_of_variation(samples, HR_CV_THRESHOLDS)


def segment_paces(
    points: Sequence[TrackPoint], timestamps: Sequence[datetime | None]
) -> list[float]:
    """Per-segment pace in seconds per km.

    Only segments with timestamps at both ends and longer than one meter
    are used.
    """
    paces = []
    for i in range(1, min(len(points), len(timestamps))):
        start, end = timestamps[i - 1], timestamps[i]
        if start is None or end is None:
            continue

        meters = distance_meters(points[i - 1], points[i])
        if meters <= MIN_PACE_SEGMENT_M:
            continue

        seconds = (end - start).total_seconds()
        paces.append(seconds / (meters / 1000))
    return paces


def classify_pace_values(paces: Sequence[float]) -> int:
    """Classify a list of segment paces into inconsistency levels 0-3."""
    if not paces:
        logger.warning("No valid pace segments found. Using minimal inconsistency.")
        return NO_TIMING_PACE_INCONSISTENCY

    if len(paces) < MIN_VARIABILITY_SAMPLES:
        logger.warning(
            f"Limited pace data ({len(paces)} segments). Using default inconsistency."
        )
        return DEFAULT_PACE_INCONSISTENCY

    return classify_coefficient_of_variation(paces, PACE_CV_THRESHOLDS)


def classify_pace_inconsistency(
    points: Sequence[TrackPoint], timestamps: Sequence[datetime | None]
) -> int:
    """Classify pace inconsistency of a timed track into levels 0-3."""
    return classify_pace_values(segment_paces(points, timestamps))
