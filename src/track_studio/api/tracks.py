"""GPX import and export API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from track_studio.config import settings
from track_studio.constants import DEFAULT_ACTIVITY_TYPE, GPX_MEDIA_TYPE
from track_studio.models.schemas import ImportResponse, RouteRequest, Units
from track_studio.services.gpx_parser import detect_activity_type, gpx_parser
from track_studio.services.gpx_synthesizer import (
    GPXSynthesizer,
    export_filename,
    validate_route_for_export,
)
from track_studio.services.import_report import build_import_report
from track_studio.services.profiles import (
    avg_pace_seconds_per_km,
    default_profile,
    profile_from_metadata,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/gpx/import", response_model=ImportResponse)
async def import_gpx(
    file: Annotated[UploadFile, File(...)],
    units: Annotated[Units, Form()] = "km",
) -> ImportResponse:
    """Parse an uploaded GPX file into a track, metadata and a matching profile."""
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    extension = "." + file.filename.rsplit(".", 1)[-1].lower() if "." in file.filename else ""
    if extension not in settings.allowed_extensions:
        raise HTTPException(status_code=400, detail="Please select a valid GPX file.")

    content = await file.read()

    if len(content) > settings.max_upload_size_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {settings.max_upload_size_bytes / (1024 * 1024):.0f}MB",
        )

    track = gpx_parser.parse(content)
    if not track.points:
        raise HTTPException(status_code=422, detail="No track points found in the GPX file.")

    detected = detect_activity_type(file.filename)
    profile = profile_from_metadata(
        default_profile(detected or DEFAULT_ACTIVITY_TYPE, units), track.metadata
    )
    report = build_import_report(track)

    logger.info(f"Imported {file.filename}: {len(track.points)} points, type={detected}")

    return ImportResponse(
        track=track,
        report=report,
        detected_activity_type=detected,
        profile=profile,
    )


@router.post("/gpx/export")
async def export_gpx(request: RouteRequest) -> Response:
    """Synthesize a GPX file for a drawn route and return it as a download."""
    profile = request.profile

    try:
        validate_route_for_export(request.points, settings.min_route_distance_m)
        gpx_content = GPXSynthesizer().generate(request.points, request.elevations, profile)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    filename = export_filename(profile)
    logger.info(
        f"Generated {filename} with {len(request.points)} points "
        f"at {avg_pace_seconds_per_km(profile):.0f} s/km"
    )

    return Response(
        content=gpx_content,
        media_type=GPX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
