"""Tests for chart series generation."""

import random

from track_studio.services.chart_series import ChartSeriesGenerator, sample_count, step_value

POINTS = [(52.52, 13.405), (52.53, 13.405)]


def generate(seed: int = 7, **overrides):
    params = {
        "points": POINTS,
        "distance": 5.0,
        "activity_type": "running",
        "pace_min": 5,
        "pace_sec": 0,
        "avg_heart_rate": 150,
        "pace_inconsistency": 1,
        "hr_variability": 1,
        "units": "km",
        "pace_format": "min/km",
    }
    params.update(overrides)
    return ChartSeriesGenerator(random.Random(seed)).generate(**params)


class TestSampling:
    def test_minimum_sample_count(self):
        assert sample_count(0.5) == 20
        assert sample_count(4.0) == 20

    def test_sample_count_scales_with_distance(self):
        assert sample_count(10.0) == 50
        assert sample_count(10.39) == 51

    def test_step_value_fallback(self):
        assert step_value((0.05, 0.15, 0.30, 0.50), 3) == 0.50
        assert step_value((0.05, 0.15, 0.30, 0.50), 7) == 0.15
        assert step_value((0.02, 0.05, 0.10), -1) == 0.05


class TestGenerate:
    def test_requires_two_points(self):
        assert generate(points=[(52.52, 13.405)]) is None

    def test_labels(self):
        data = generate(distance=10.0)

        assert len(data.pace.labels) == 50
        assert data.pace.labels[0] == "0.2 km"
        assert data.pace.labels[-1] == "10.0 km"
        assert data.heart_rate.labels == data.pace.labels

    def test_miles_labels(self):
        data = generate(units="mi", pace_format="min/mi", distance=2.0)
        assert data.pace.labels[-1] == "2.0 mi"

    def test_pace_within_variance(self):
        data = generate(pace_inconsistency=0)

        assert data.pace.label == "Pace (min/km)"
        assert data.pace.value_kind == "pace"
        assert all(5 * 0.95 <= value <= 5 * 1.05 for value in data.pace.data)

    def test_pace_in_min_per_mile(self):
        data = generate(pace_min=8, pace_format="min/mi", units="mi", pace_inconsistency=0)

        assert data.pace.label == "Pace (min/mi)"
        assert all(8 * 0.95 <= value <= 8 * 1.05 for value in data.pace.data)

    def test_cycling_speed(self):
        data = generate(activity_type="cycling", pace_min=25, pace_inconsistency=2)

        assert data.pace.label == "Speed (km/h)"
        assert data.pace.value_kind == "speed"
        assert all(19 <= value <= 31 for value in data.pace.data)

    def test_cycling_speed_floor(self):
        data = generate(activity_type="cycling", pace_min=2, pace_inconsistency=3)
        assert min(data.pace.data) >= 0

    def test_heart_rate_clamped_to_activity_range(self):
        data = generate(activity_type="walking", avg_heart_rate=200, hr_variability=2)

        assert data.heart_rate.label == "Heart Rate (bpm)"
        assert all(80 <= value <= 140 for value in data.heart_rate.data)
        assert max(data.heart_rate.data) == 140

    def test_heart_rate_values_are_whole_numbers(self):
        data = generate()
        assert all(value == round(value) for value in data.heart_rate.data)

    def test_seeded_output_is_reproducible(self):
        assert generate(seed=3) == generate(seed=3)
        assert generate(seed=3).pace.data != generate(seed=4).pace.data

    def test_series_do_not_share_lists(self):
        data = generate()
        count = len(data.heart_rate.labels)

        data.pace.labels.append("extra")
        assert len(data.heart_rate.labels) == count == 25


class TestFormatValue:
    def test_pace_formatter(self):
        data = generate()
        assert data.pace.format_value(5.5) == "5:30"
        assert data.pace.format_value(4.0) == "4:00"

    def test_speed_formatter(self):
        data = generate(activity_type="cycling", pace_min=20, units="mi")
        assert data.pace.format_value(18.26) == "18.3 mph"

    def test_heart_rate_formatter(self):
        assert generate().heart_rate.format_value(151.0) == "151 bpm"
