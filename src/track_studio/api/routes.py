"""Route metrics API endpoints (stats panel and charts)."""

from fastapi import APIRouter, HTTPException

from track_studio.models.schemas import ChartData, RouteRequest, RouteStats
from track_studio.services.chart_series import ChartSeriesGenerator
from track_studio.services.geo_metrics import route_distance, route_stats

router = APIRouter()


@router.post("/route/stats", response_model=RouteStats)
async def get_route_stats(request: RouteRequest) -> RouteStats:
    """Distance, elevation gain, pace and duration display strings for a route."""
    return route_stats(request.points, request.elevations, request.profile)


@router.post("/route/charts", response_model=ChartData)
async def get_route_charts(request: RouteRequest) -> ChartData:
    """Synthetic pace/speed and heart rate series for a route."""
    distance = route_distance(request.points, request.profile.units)
    chart_data = ChartSeriesGenerator().generate_for_profile(
        request.points, distance, request.profile
    )
    if chart_data is None:
        raise HTTPException(status_code=422, detail="Route needs at least two points")
    return chart_data
