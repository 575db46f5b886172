"""Options API endpoint for activity types."""

from fastapi import APIRouter

from track_studio.constants import ACTIVITY_TYPES
from track_studio.models.schemas import ActivityOption, ActivityOptionsResponse
from track_studio.services.profiles import default_profile, get_activity_config

router = APIRouter()


@router.get("/options/activities", response_model=ActivityOptionsResponse)
async def get_activity_options() -> ActivityOptionsResponse:
    """Get activity types with their configuration and default profile."""
    return ActivityOptionsResponse(
        activities=[
            ActivityOption(
                activity_type=activity_type,
                config=get_activity_config(activity_type),
                default_profile=default_profile(activity_type),
            )
            for activity_type in ACTIVITY_TYPES
        ]
    )
