"""User-facing summary of an imported GPX track."""

from track_studio.constants import MIN_VARIABILITY_SAMPLES
from track_studio.models.schemas import ImportReport, ParsedTrack
from track_studio.services.variability import valid_heart_rates


def build_import_report(track: ParsedTrack) -> ImportReport:
    """Summarize an import and collect data-quality warnings."""
    metadata = track.metadata

    duration = f"{round(metadata.duration / 60)} minutes" if metadata and metadata.duration else "N/A"
    distance = f"{metadata.distance:.2f} km" if metadata and metadata.distance else "N/A"
    avg_hr = metadata.avg_heart_rate if metadata and metadata.avg_heart_rate else "N/A"
    name = metadata.name if metadata else "N/A"

    message = (
        f"Successfully imported {len(track.points)} track points with metadata:\n"
        f"Name: {name}\n"
        f"Duration: {duration}\n"
        f"Distance: {distance}\n"
        f"Avg HR: {avg_hr} bpm"
    )

    return ImportReport(message=message, warnings=_generate_warnings(track))


def _generate_warnings(track: ParsedTrack) -> list[str]:
    """Generate data-quality warnings for an imported track."""
    warnings: list[str] = []

    quality = track.metadata.data_quality if track.metadata else None
    if quality is None:
        return warnings

    if quality.timing_accuracy == "low":
        warnings.append(
            f"Limited timing data ({quality.point_count} points). "
            "Pace variability calculations may be inaccurate. "
            "Use GPS files with more detailed tracking."
        )
    elif quality.timing_accuracy == "medium":
        warnings.append(
            f"Moderate timing data ({quality.point_count} points). "
            "Variability calculations are estimates."
        )

    if not quality.has_heart_rate_data:
        warnings.append(
            "No heart rate data found. Using default heart rate variability settings."
        )
    elif len(valid_heart_rates(track.heart_rates)) < MIN_VARIABILITY_SAMPLES:
        warnings.append(
            "Limited heart rate data. HR variability calculations may be inaccurate."
        )

    return warnings
