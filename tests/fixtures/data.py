"""Test data constants and sample data."""

# Garmin-style export with TrackPointExtension heart rate
SAMPLE_GPX_CONTENT = """<?xml version="1.0" encoding="UTF-8"?>
<gpx xmlns="http://www.topografix.com/GPX/1/1"
     xmlns:gpxtpx="http://www.garmin.com/xmlschemas/TrackPointExtension/v1"
     version="1.1" creator="Test">
  <metadata>
    <name>Metadata Name</name>
    <desc>Morning loop around the park</desc>
    <time>2024-01-01T11:59:00Z</time>
  </metadata>
  <trk>
    <name>Test Track</name>
    <trkseg>
      <trkpt lat="55.7558" lon="37.6173">
        <ele>150</ele>
        <time>2024-01-01T12:00:00Z</time>
        <extensions>
          <gpxtpx:TrackPointExtension>
            <gpxtpx:hr>140</gpxtpx:hr>
          </gpxtpx:TrackPointExtension>
        </extensions>
      </trkpt>
      <trkpt lat="55.7568" lon="37.6173">
        <ele>152.5</ele>
        <time>2024-01-01T12:00:30Z</time>
        <extensions>
          <gpxtpx:TrackPointExtension>
            <gpxtpx:hr>150</gpxtpx:hr>
          </gpxtpx:TrackPointExtension>
        </extensions>
      </trkpt>
      <trkpt lat="55.7578" lon="37.6173">
        <ele>151</ele>
        <time>2024-01-01T12:01:00Z</time>
        <extensions>
          <gpxtpx:TrackPointExtension>
            <gpxtpx:hr>160</gpxtpx:hr>
          </gpxtpx:TrackPointExtension>
        </extensions>
      </trkpt>
    </trkseg>
  </trk>
</gpx>"""

# GPX 1.0 style without namespace, timing or heart rate
SAMPLE_GPX_NO_TIMING = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.0">
  <trk>
    <trkseg>
      <trkpt lat="-3.3194" lon="114.5906"><ele>12</ele></trkpt>
      <trkpt lat="-3.3200" lon="114.5920"></trkpt>
    </trkseg>
  </trk>
</gpx>"""

# Samsung Health writes the start time in a top-level <metadate> element
SAMPLE_GPX_SAMSUNG = """<?xml version="1.0" encoding="UTF-8"?>
<gpx xmlns="http://www.topografix.com/GPX/1/1" version="1.1" creator="Samsung Health">
  <metadate>2023-06-10T06:15:00Z</metadate>
  <trk>
    <trkseg>
      <trkpt lat="1.3000" lon="103.8000"><hr>120</hr></trkpt>
      <trkpt lat="1.3010" lon="103.8000"><hr>125</hr></trkpt>
    </trkseg>
  </trk>
</gpx>"""

SAMPLE_MALFORMED_GPX = "<gpx><trk><trkseg><trkpt lat='1' lon='2'></trkseg></gpx"

# Small route about 300 m long heading north
SAMPLE_ROUTE = [
    (52.5200, 13.4050),
    (52.5209, 13.4050),
    (52.5218, 13.4050),
    (52.5227, 13.4050),
]
SAMPLE_ELEVATIONS = [34.0, 35.5, 35.0, 37.25]
