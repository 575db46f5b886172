"""Tests for the import summary and data-quality warnings."""

from track_studio.services.gpx_parser import gpx_parser
from track_studio.services.import_report import build_import_report
from tests.fixtures.data import SAMPLE_GPX_NO_TIMING
from tests.fixtures.factories import create_gpx, create_straight_route, create_timestamps


def import_track(count: int, heart_rates: list[int] | None = None):
    points = create_straight_route(count, step_deg=0.0001)
    return gpx_parser.parse(create_gpx(points, create_timestamps(count), heart_rates))


class TestMessage:
    def test_summary(self, sample_gpx_content):
        report = build_import_report(gpx_parser.parse(sample_gpx_content))

        assert report.message == (
            "Successfully imported 3 track points with metadata:\n"
            "Name: Test Track\n"
            "Duration: 1 minutes\n"
            "Distance: 0.22 km\n"
            "Avg HR: 150 bpm"
        )

    def test_missing_values(self):
        report = build_import_report(gpx_parser.parse(SAMPLE_GPX_NO_TIMING))

        assert "Duration: N/A" in report.message
        assert "Distance: N/A" in report.message
        assert "Avg HR: N/A bpm" in report.message


class TestWarnings:
    def test_no_timing_has_no_quality_warnings(self):
        assert build_import_report(gpx_parser.parse(SAMPLE_GPX_NO_TIMING)).warnings == []

    def test_low_timing_and_limited_heart_rate(self, sample_gpx_content):
        warnings = build_import_report(gpx_parser.parse(sample_gpx_content)).warnings

        assert len(warnings) == 2
        assert warnings[0].startswith("Limited timing data (3 points)")
        assert warnings[1].startswith("Limited heart rate data")

    def test_moderate_timing_without_heart_rate(self):
        warnings = build_import_report(import_track(50)).warnings

        assert len(warnings) == 2
        assert warnings[0].startswith("Moderate timing data (50 points)")
        assert warnings[1].startswith("No heart rate data found")

    def test_detailed_track_has_no_warnings(self):
        assert build_import_report(import_track(120, [150] * 120)).warnings == []
