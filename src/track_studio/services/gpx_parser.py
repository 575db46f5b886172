"""GPX parsing service - converts GPX documents into track series and metadata."""

import logging
import math
import xml.etree.ElementTree as ET
from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from track_studio.config import settings
from track_studio.constants import (
    ACTIVITY_FILENAME_KEYWORDS,
    DEFAULT_TRACK_DESCRIPTION,
    DEFAULT_TRACK_NAME,
    LEGACY_METADATA_TIME_TAG,
    MIN_POINTS_FOR_PACE_VARIABILITY,
    TIMING_HIGH_MIN_POINTS,
    TIMING_MEDIUM_MIN_POINTS,
    TPX_NAMESPACE,
    TPX_NAMESPACE_V2,
)
from track_studio.models.schemas import (
    ActivityMetadata,
    ActivityType,
    DataQuality,
    Pace,
    ParsedTrack,
    TimingAccuracy,
    TrackPoint,
)
from track_studio.services.geo_metrics import route_distance
from track_studio.services.variability import (
    classify_hr_variability,
    classify_pace_inconsistency,
    valid_heart_rates,
)

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    """Strip the "{namespace}" prefix ElementTree puts on tags."""
    return tag.rsplit("}", 1)[-1]


def _namespace(tag: str) -> str | None:
    return tag[1:].split("}", 1)[0] if tag.startswith("{") else None


def _child(elem: ET.Element | None, name: str) -> ET.Element | None:
    """First direct child with the given local name, any namespace."""
    if elem is None:
        return None
    for child in elem:
        if _local_name(child.tag) == name:
            return child
    return None


def _path(elem: ET.Element | None, *names: str) -> ET.Element | None:
    for name in names:
        elem = _child(elem, name)
    return elem


def _text(elem: ET.Element | None) -> str | None:
    if elem is None or elem.text is None:
        return None
    text = elem.text.strip()
    return text or None


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp; naive values are taken as UTC."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _parse_float(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _parse_int(value: str | None) -> int | None:
    number = _parse_float(value)
    return None if number is None else int(number)


# =============================================================================
# Heart rate locations, tried in order
# =============================================================================


def _namespaced_tpx_hr(trkpt: ET.Element) -> ET.Element | None:
    """A TrackPointExtension <hr> anywhere below the point."""
    for namespace in (TPX_NAMESPACE, TPX_NAMESPACE_V2):
        found = trkpt.find(f".//{{{namespace}}}hr")
        if found is not None:
            return found
    return None


def _bare_hr(trkpt: ET.Element) -> ET.Element | None:
    """An <hr> without an extension namespace (plain or GPX namespace)."""
    for elem in trkpt.iter():
        if elem is trkpt or _local_name(elem.tag) != "hr":
            continue
        if _namespace(elem.tag) in (None, _namespace(trkpt.tag)):
            return elem
    return None


def _nested_extension_hr(trkpt: ET.Element) -> ET.Element | None:
    """extensions/TrackPointExtension/hr under any prefix."""
    return _path(trkpt, "extensions", "TrackPointExtension", "hr")


HEART_RATE_LOCATIONS: list[Callable[[ET.Element], ET.Element | None]] = [
    _namespaced_tpx_hr,
    _bare_hr,
    _nested_extension_hr,
]


def first_match(root: ET.Element, strategies: Sequence[Callable]) -> ET.Element | None:
    """Evaluate strategies in order and return the first element found."""
    for strategy in strategies:
        found = strategy(root)
        if found is not None:
            return found
    return None


# =============================================================================
# Metadata locations, tried in order
# =============================================================================


NAME_LOCATIONS = [
    lambda root: _path(root, "trk", "name"),
    lambda root: _path(root, "metadata", "name"),
]

DESCRIPTION_LOCATIONS = [
    lambda root: _path(root, "metadata", "desc"),
    lambda root: _path(root, "trk", "desc"),
]

START_TIME_LOCATIONS = [
    lambda root: _path(root, "metadata", "time"),
    lambda root: _child(root, LEGACY_METADATA_TIME_TAG),
]


def timing_accuracy(point_count: int) -> TimingAccuracy:
    """Classify timing density by number of track points."""
    if point_count > TIMING_HIGH_MIN_POINTS:
        return "high"
    if point_count > TIMING_MEDIUM_MIN_POINTS:
        return "medium"
    return "low"


def detect_activity_type(filename: str) -> ActivityType | None:
    """Guess the activity type from keywords in a file name."""
    name = filename.lower()
    for keywords, activity_type in ACTIVITY_FILENAME_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return activity_type
    return None


class GPXParser:
    """Parses GPX documents into a ParsedTrack."""

    def __init__(self, default_elevation: float | None = None):
        self.default_elevation = (
            settings.default_elevation_m if default_elevation is None else default_elevation
        )

    def parse(self, xml_content: str | bytes) -> ParsedTrack:
        """
        Parse a GPX document.

        Malformed XML does not raise: the result then has no points and
        default metadata, and callers treat an empty point list as
        "no usable track".

        Args:
            xml_content: GPX document text

        Returns:
            ParsedTrack with points, parallel arrays and metadata
        """
        try:
            root = ET.fromstring(xml_content)
        except ET.ParseError as e:
            logger.warning(f"Could not parse GPX document: {e}")
            return ParsedTrack(metadata=self.extract_metadata(None, [], [], []))

        points: list[TrackPoint] = []
        elevations: list[float] = []
        timestamps: list[datetime | None] = []
        heart_rates: list[int | None] = []

        for trkpt in root.iter():
            if _local_name(trkpt.tag) != "trkpt":
                continue

            lat = _parse_float(trkpt.get("lat"))
            lon = _parse_float(trkpt.get("lon"))
            if lat is None or lon is None:
                logger.warning(
                    "Skipping track point without numeric coordinates: "
                    f"lat={trkpt.get('lat')!r} lon={trkpt.get('lon')!r}"
                )
                continue

            elevation = _parse_float(_text(_child(trkpt, "ele")))

            points.append((lat, lon))
            elevations.append(self.default_elevation if elevation is None else elevation)
            timestamps.append(parse_timestamp(_text(_child(trkpt, "time"))))
            heart_rates.append(_parse_int(_text(first_match(trkpt, HEART_RATE_LOCATIONS))))

        metadata = self.extract_metadata(root, points, timestamps, heart_rates)
        logger.debug(f"Parsed GPX with {len(points)} points: {metadata!r}")

        return ParsedTrack(
            points=points,
            elevations=elevations,
            timestamps=timestamps,
            heart_rates=heart_rates,
            metadata=metadata,
        )

    def extract_metadata(
        self,
        root: ET.Element | None,
        points: list[TrackPoint],
        timestamps: list[datetime | None],
        heart_rates: list[int | None],
    ) -> ActivityMetadata:
        """Derive activity metadata from the document and its track points."""
        fields: dict = {
            "name": self._first_text(root, NAME_LOCATIONS) or DEFAULT_TRACK_NAME,
            "description": self._first_text(root, DESCRIPTION_LOCATIONS)
            or DEFAULT_TRACK_DESCRIPTION,
            "start_time": self._start_time(root, timestamps),
        }

        valid_hr = valid_heart_rates(heart_rates)

        first = timestamps[0] if timestamps else None
        last = timestamps[-1] if timestamps else None
        if len(timestamps) > 1 and first is not None and last is not None:
            duration = (last - first).total_seconds()
            distance_km = route_distance(points, "km")

            fields["duration"] = duration
            fields["distance"] = distance_km
            if distance_km > 0 and duration > 0:
                minutes, seconds = divmod(round(duration / distance_km), 60)
                fields["pace"] = Pace(minutes=minutes, seconds=seconds)

            fields["data_quality"] = DataQuality(
                point_count=len(points),
                has_detailed_timing=len(points) > TIMING_HIGH_MIN_POINTS,
                has_heart_rate_data=bool(valid_hr),
                timing_accuracy=timing_accuracy(len(points)),
            )

        if valid_hr:
            fields["avg_heart_rate"] = round(sum(valid_hr) / len(valid_hr))
            fields["hr_variability"] = classify_hr_variability(valid_hr)

        if "pace" in fields and len(timestamps) > MIN_POINTS_FOR_PACE_VARIABILITY:
            fields["pace_inconsistency"] = classify_pace_inconsistency(points, timestamps)
        else:
            logger.warning("Insufficient timing data for pace variability calculation.")
            fields["pace_inconsistency"] = 0

        return ActivityMetadata(**fields)

    def _first_text(self, root: ET.Element | None, locations: list) -> str | None:
        if root is None:
            return None
        for location in locations:
            text = _text(location(root))
            if text is not None:
                return text
        return None

    def _start_time(self, root: ET.Element | None, timestamps: list[datetime | None]) -> datetime:
        if root is not None:
            for location in START_TIME_LOCATIONS:
                start = parse_timestamp(_text(location(root)))
                if start is not None:
                    return start
        if timestamps and timestamps[0] is not None:
            return timestamps[0]
        return datetime.now(UTC)


# Singleton instance
gpx_parser = GPXParser()
