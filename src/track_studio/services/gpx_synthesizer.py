"""GPX synthesis service - builds timestamped GPX tracks from drawn routes."""

import logging
import random
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from track_studio.config import Settings, settings
from track_studio.constants import (
    COORDINATE_DECIMALS,
    ELEVATION_DECIMALS,
    GPX_NAMESPACE,
    GPX_SCHEMA_LOCATION,
    GPX_VERSION,
    SYNTH_HR_NOISE_PER_LEVEL,
    SYNTH_MIN_SEGMENT_SECONDS,
    TPX_NAMESPACE,
    TPX_SCHEMA_LOCATION,
    XSI_NAMESPACE,
)
from track_studio.models.schemas import ActivityProfile, ParsedTrack, TrackPoint
from track_studio.services.chart_series import new_rng
from track_studio.services.geo_metrics import distance_meters, route_distance
from track_studio.services.profiles import avg_pace_seconds_per_km, get_activity_config

logger = logging.getLogger(__name__)

ET.register_namespace("", GPX_NAMESPACE)
ET.register_namespace("gpxtpx", TPX_NAMESPACE)
ET.register_namespace("xsi", XSI_NAMESPACE)


class InvalidProfileError(ValueError):
    """The activity profile cannot be turned into a track."""


class InvalidRouteError(ValueError):
    """The route does not meet the export rules."""


def _gpx(tag: str) -> str:
    return f"{{{GPX_NAMESPACE}}}{tag}"


def _tpx(tag: str) -> str:
    return f"{{{TPX_NAMESPACE}}}{tag}"


def format_timestamp(value: datetime) -> str:
    """ISO 8601 UTC with milliseconds and a Z suffix."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_start(date: str | None, start_time: str | None) -> datetime:
    """Combine a date and a time of day into an aware start instant.

    Values without an explicit offset are taken as UTC.

    Raises:
        InvalidProfileError: If the date or time cannot be parsed
    """
    if not date or not start_time:
        raise InvalidProfileError("Invalid date or time")
    try:
        start = datetime.fromisoformat(f"{date}T{start_time}")
    except ValueError as e:
        raise InvalidProfileError("Invalid date or time") from e
    if start.tzinfo is None:
        start = start.replace(tzinfo=UTC)
    return start


def export_filename(profile: ActivityProfile) -> str:
    """Download file name for a generated GPX file."""
    return f"{profile.name.replace(' ', '_')}_{profile.activity_type}.gpx"


def validate_route_for_export(points: Sequence[TrackPoint], min_distance_m: float) -> None:
    """Check the business rules a route must meet before synthesis.

    Raises:
        InvalidRouteError: If the route has fewer than two points or is too short
    """
    if len(points) < 2:
        raise InvalidRouteError("Please draw a route with at least two points.")

    distance_m = route_distance(points, "km") * 1000
    if distance_m < min_distance_m:
        raise InvalidRouteError(
            f"Route is too short. Minimum {min_distance_m:g} meters for Strava compatibility."
        )


class GPXSynthesizer:
    """Synthesizes GPX documents with realistic timing and heart rate."""

    def __init__(self, rng: random.Random | None = None, config: Settings | None = None):
        self.rng = rng or new_rng()
        self.config = config or settings

    def synthesize_track(
        self,
        route_points: Sequence[TrackPoint],
        elevation_data: Sequence[float | None],
        profile: ActivityProfile,
    ) -> ParsedTrack:
        """
        Build per-point timestamps, elevations and heart rates for a route.

        Args:
            route_points: Ordered route points
            elevation_data: Elevations parallel to route_points (may be shorter)
            profile: Target activity profile

        Returns:
            ParsedTrack with the synthesized series (no metadata)

        Raises:
            InvalidProfileError: If the profile date/time is not a valid instant
        """
        start = parse_start(profile.date, profile.start_time)
        hr_range = get_activity_config(profile.activity_type).hr_range
        try:
            pace_seconds = avg_pace_seconds_per_km(profile)
        except ValueError as e:
            raise InvalidProfileError(str(e)) from e
        min_segment_low, min_segment_high = SYNTH_MIN_SEGMENT_SECONDS

        timestamps: list[datetime | None] = []
        elevations: list[float] = []
        heart_rates: list[int | None] = []
        cumulative = 0.0

        for i, point in enumerate(route_points):
            if i > 0:
                segment_km = distance_meters(route_points[i - 1], point) / 1000
                min_segment = self.rng.uniform(min_segment_low, min_segment_high)
                cumulative += max(min_segment, segment_km * pace_seconds)

            timestamps.append(start + timedelta(milliseconds=round(cumulative * 1000)))

            elevation = elevation_data[i] if i < len(elevation_data) else None
            elevations.append(
                self.config.default_elevation_m if elevation is None else float(elevation)
            )

            noise = self.rng.uniform(-1, 1) * profile.hr_variability * SYNTH_HR_NOISE_PER_LEVEL
            hr = round(profile.avg_heart_rate * (1 + noise))
            heart_rates.append(int(max(hr_range.min, min(hr_range.max, hr))))

        return ParsedTrack(
            points=list(route_points),
            elevations=elevations,
            timestamps=timestamps,
            heart_rates=heart_rates,
        )

    def generate(
        self,
        route_points: Sequence[TrackPoint],
        elevation_data: Sequence[float | None],
        profile: ActivityProfile,
    ) -> str:
        """Generate a GPX 1.1 document for a route and activity profile."""
        track = self.synthesize_track(route_points, elevation_data, profile)
        return self.track_to_xml(track, profile)

    def track_to_xml(self, track: ParsedTrack, profile: ActivityProfile) -> str:
        """Render a synthesized track as GPX text."""
        start = parse_start(profile.date, profile.start_time)

        root = ET.Element(
            _gpx("gpx"),
            {
                "version": GPX_VERSION,
                "creator": self.config.gpx_creator,
                f"{{{XSI_NAMESPACE}}}schemaLocation": (
                    f"{GPX_NAMESPACE} {GPX_SCHEMA_LOCATION} {TPX_NAMESPACE} {TPX_SCHEMA_LOCATION}"
                ),
            },
        )

        time_tag = self.config.metadata_time_tag
        if time_tag == "metadata":
            metadata_elem = ET.SubElement(root, _gpx("metadata"))
            ET.SubElement(metadata_elem, _gpx("time")).text = format_timestamp(start)
        else:
            ET.SubElement(root, _gpx(time_tag)).text = format_timestamp(start)

        trk = ET.SubElement(root, _gpx("trk"))
        ET.SubElement(trk, _gpx("name")).text = profile.name
        if profile.description:
            ET.SubElement(trk, _gpx("desc")).text = profile.description
        trkseg = ET.SubElement(trk, _gpx("trkseg"))

        for (lat, lon), elevation, timestamp, hr in zip(
            track.points, track.elevations, track.timestamps, track.heart_rates
        ):
            trkpt = ET.SubElement(
                trkseg,
                _gpx("trkpt"),
                {
                    "lat": f"{lat:.{COORDINATE_DECIMALS}f}",
                    "lon": f"{lon:.{COORDINATE_DECIMALS}f}",
                },
            )
            ET.SubElement(trkpt, _gpx("ele")).text = str(round(elevation, ELEVATION_DECIMALS))
            ET.SubElement(trkpt, _gpx("time")).text = format_timestamp(timestamp)
            extensions = ET.SubElement(trkpt, _gpx("extensions"))
            tpx = ET.SubElement(extensions, _tpx("TrackPointExtension"))
            ET.SubElement(tpx, _tpx("hr")).text = str(hr)

        self._indent_xml(root)
        logger.debug(f"Generated GPX with {len(track.points)} points")

        return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(root, encoding="unicode")

    def _indent_xml(self, elem: ET.Element, level: int = 0) -> None:
        """Add indentation to XML element for pretty printing."""
        indent = "\n" + "  " * level
        if len(elem):
            if not elem.text or not elem.text.strip():
                elem.text = indent + "  "
            if not elem.tail or not elem.tail.strip():
                elem.tail = indent
            for child in elem:
                self._indent_xml(child, level + 1)
            if not child.tail or not child.tail.strip():
                child.tail = indent
        else:
            if level and (not elem.tail or not elem.tail.strip()):
                elem.tail = indent
