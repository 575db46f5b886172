"""Centralized constants for the track_studio application.

Unit conversions, activity configurations, variability step tables and GPX
namespaces live here so that every service shares a single source of truth.
"""

# =============================================================================
# UNIT CONVERSIONS
# =============================================================================
# Only KM_PER_MILE is canonical; the reciprocal is derived so that repeated
# km <-> mi conversions round-trip exactly.

KM_PER_MILE = 1.60934
MILES_PER_KM = 1 / KM_PER_MILE

EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_M = EARTH_RADIUS_KM * 1000

UNIT_LABELS = {"km": "km", "mi": "mi"}
SPEED_LABELS = {"km": "km/h", "mi": "mph"}

DEFAULT_UNITS = "km"
DEFAULT_PACE_FORMAT = "min/km"
PACE_FORMAT_FOR_UNITS = {"km": "min/km", "mi": "min/mi"}

# =============================================================================
# ACTIVITY CONFIGURATIONS
# =============================================================================

ACTIVITY_TYPES = ("running", "walking", "hiking", "cycling")
DEFAULT_ACTIVITY_TYPE = "running"

ACTIVITY_CONFIGS = {
    "running": {
        "pace_type": "Pace",
        "pace_range": {"min": 3, "max": 8},
        "hr_range": {"min": 120, "max": 180},
        "elevation_factor": 1.0,
        "routing_profile": "foot",
    },
    "cycling": {
        "pace_type": "Speed",
        "pace_range": {"min": 15, "max": 45},
        "hr_range": {"min": 110, "max": 170},
        "elevation_factor": 0.8,
        "routing_profile": "cycling",
    },
    "walking": {
        "pace_type": "Pace",
        "pace_range": {"min": 8, "max": 15},
        "hr_range": {"min": 80, "max": 140},
        "elevation_factor": 1.2,
        "routing_profile": "foot",
    },
    "hiking": {
        "pace_type": "Pace",
        "pace_range": {"min": 10, "max": 20},
        "hr_range": {"min": 90, "max": 160},
        "elevation_factor": 1.5,
        "routing_profile": "foot",
    },
}

DEFAULT_CYCLING_SPEED = 25
DEFAULT_PACE_SECONDS = 30

# Filename keywords used to guess the activity type of an imported file
ACTIVITY_FILENAME_KEYWORDS = (
    (("run", "jog"), "running"),
    (("walk",), "walking"),
    (("bike", "cycle"), "cycling"),
    (("hike",), "hiking"),
)

# =============================================================================
# VARIABILITY TABLES
# =============================================================================
# Slider position (ordinal) -> noise amplitude

PACE_VARIANCE_STEPS = (0.05, 0.15, 0.30, 0.50)  # fraction of pace
SPEED_VARIANCE_STEPS = (1, 3, 6, 10)  # absolute km/h or mph
HR_VARIANCE_STEPS = (0.02, 0.05, 0.10)  # fraction of average HR
DEFAULT_VARIANCE_INDEX = 1

# Coefficient of variation -> ordinal (last ordinal is catch-all)
HR_CV_THRESHOLDS = (0.03, 0.075)
PACE_CV_THRESHOLDS = (0.10, 0.225, 0.40)

MIN_VARIABILITY_SAMPLES = 10
DEFAULT_HR_VARIABILITY = 1
DEFAULT_PACE_INCONSISTENCY = 1
NO_TIMING_PACE_INCONSISTENCY = 0

# Pace segments shorter than this are GPS jitter
MIN_PACE_SEGMENT_M = 1.0
# Tracks with this many points or fewer skip pace classification
MIN_POINTS_FOR_PACE_VARIABILITY = 5

# HR noise per hr_variability level when synthesizing track points
SYNTH_HR_NOISE_PER_LEVEL = 0.05
# Bounds (seconds) of the minimum time spent on any synthesized segment
SYNTH_MIN_SEGMENT_SECONDS = (1.0, 2.0)

# =============================================================================
# CHART SERIES
# =============================================================================

MIN_CHART_SAMPLES = 20
CHART_SAMPLES_PER_UNIT = 5

# =============================================================================
# DATA QUALITY
# =============================================================================

TIMING_HIGH_MIN_POINTS = 100  # more than this -> "high"
TIMING_MEDIUM_MIN_POINTS = 20  # more than this -> "medium"

# =============================================================================
# GPX
# =============================================================================

GPX_NAMESPACE = "http://www.topografix.com/GPX/1/1"
GPX_SCHEMA_LOCATION = "http://www.topografix.com/GPX/1/1/gpx.xsd"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
TPX_NAMESPACE = "http://www.garmin.com/xmlschemas/TrackPointExtension/v1"
TPX_NAMESPACE_V2 = "http://www.garmin.com/xmlschemas/TrackPointExtension/v2"
TPX_SCHEMA_LOCATION = "http://www.garmin.com/xmlschemas/TrackPointExtensionv1.xsd"
GPX_VERSION = "1.1"
GPX_MEDIA_TYPE = "application/gpx+xml"

DEFAULT_TRACK_NAME = "Imported Activity"
DEFAULT_TRACK_DESCRIPTION = "Imported from GPX file"
# Samsung Health (and older exports of this tool) write the start time here
LEGACY_METADATA_TIME_TAG = "metadate"

COORDINATE_DECIMALS = 7
ELEVATION_DECIMALS = 3
